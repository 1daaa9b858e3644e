"""Use cases do canal Email."""

from .send_email import SendEmailUseCase

__all__ = ["SendEmailUseCase"]
