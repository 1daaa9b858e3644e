"""Protocolos e contratos do core da aplicação."""

from .http_client import EmailHttpClientProtocol
from .models import (
    Attachment,
    AttachmentContent,
    AttachmentEntry,
    BytesContent,
    CreateEmailResponse,
    FileContent,
    MessageRequest,
    NormalizedAttachment,
    NormalizedMessage,
    StreamContent,
    Tag,
    TemplateComponent,
    TextContent,
)
from .payload_builder import PayloadBuilderProtocol
from .renderer import RendererProtocol
from .validator import EmailRequestValidatorProtocol, ValidationError

__all__ = [
    "Attachment",
    "AttachmentContent",
    "AttachmentEntry",
    "BytesContent",
    "CreateEmailResponse",
    "EmailHttpClientProtocol",
    "EmailRequestValidatorProtocol",
    "FileContent",
    "MessageRequest",
    "NormalizedAttachment",
    "NormalizedMessage",
    "PayloadBuilderProtocol",
    "RendererProtocol",
    "StreamContent",
    "Tag",
    "TemplateComponent",
    "TextContent",
    "ValidationError",
]
