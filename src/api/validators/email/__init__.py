"""Validators para Email (API HTTP).

Uso:
    from api.validators.email import EmailMessageValidator, ValidationError

    validator = EmailMessageValidator()
    validator.validate_request(request, api_key)
"""

from api.validators.email.limits import (
    MAX_ATTACHMENTS_SIZE_BYTES,
    MAX_TAG_LENGTH,
    MAX_TO_RECIPIENTS,
)
from api.validators.email.validator_dispatcher import EmailMessageValidator
from utils.errors import ValidationError

__all__ = [
    "MAX_ATTACHMENTS_SIZE_BYTES",
    "MAX_TAG_LENGTH",
    "MAX_TO_RECIPIENTS",
    "EmailMessageValidator",
    "ValidationError",
]
