"""Modelos canônicos do envio de email.

Contratos compartilhados entre api/ e app/:
- MessageRequest: mensagem como fornecida pelo chamador (nunca mutada)
- Attachment e variantes de conteúdo (conjunto fechado)
- NormalizedMessage / NormalizedAttachment: forma pronta para o wire
- CreateEmailResponse: forma esperada da resposta remota
"""

from __future__ import annotations

import os
from collections.abc import AsyncIterable, Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Literal, TypedDict, Union

Recipients = Union[str, Sequence[str]]


class CreateEmailResponse(TypedDict):
    """Resposta de sucesso da API de email."""

    id: str


@dataclass(frozen=True, slots=True)
class Tag:
    """Tag de email (name/value)."""

    name: str
    value: str

    def to_payload(self) -> dict[str, str]:
        return {"name": self.name, "value": self.value}


# ---------------------------------------------------------------------------
# Variantes de conteúdo de anexo
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TextContent:
    """Conteúdo já serializável (texto do chamador ou base64 pronto)."""

    value: str


@dataclass(frozen=True, slots=True)
class BytesContent:
    """Buffer de bytes em memória; codificado em base64 no envio."""

    data: bytes


@dataclass(frozen=True, slots=True)
class StreamContent:
    """Contêiner de bytes lazy; materializado sob demanda."""

    read: Callable[[], Awaitable[bytes]]

    @classmethod
    def from_chunks(cls, chunks: AsyncIterable[bytes]) -> StreamContent:
        """Cria conteúdo lazy a partir de um iterável assíncrono de chunks."""

        async def _read() -> bytes:
            return b"".join([chunk async for chunk in chunks])

        return cls(read=_read)


@dataclass(frozen=True, slots=True)
class FileContent:
    """Handle de arquivo binário aberto; lido integralmente no envio."""

    handle: BinaryIO


AttachmentContent = Union[TextContent, BytesContent, StreamContent, FileContent]

CONTENT_VARIANTS = (TextContent, BytesContent, StreamContent, FileContent)


@dataclass(frozen=True)
class Attachment:
    """Anexo de email: exatamente um de `content` ou `path`.

    Attributes:
        content: Conteúdo (str, bytes e handles binários são convertidos
            para a variante correspondente)
        path: URL onde o arquivo está hospedado
        filename: Nome do arquivo; False serializa `false` explicitamente
    """

    content: AttachmentContent | str | bytes | BinaryIO | None = None
    path: str | None = None
    filename: str | Literal[False] | None = None

    def __post_init__(self) -> None:
        if isinstance(self.content, str):
            object.__setattr__(self, "content", TextContent(self.content))
        elif isinstance(self.content, (bytes, bytearray, memoryview)):
            object.__setattr__(self, "content", BytesContent(bytes(self.content)))
        elif not isinstance(self.content, CONTENT_VARIANTS) and callable(
            getattr(self.content, "read", None)
        ):
            object.__setattr__(self, "content", FileContent(self.content))

    @classmethod
    def from_file(cls, handle: BinaryIO) -> Attachment:
        """Cria anexo a partir de um handle, usando o nome intrínseco do arquivo."""
        name = getattr(handle, "name", None)
        filename = os.path.basename(name) if isinstance(name, str) and name else None
        return cls(content=FileContent(handle), filename=filename)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Attachment:
        return cls(
            content=data.get("content"),
            path=data.get("path"),
            filename=data.get("filename"),
        )


AttachmentEntry = Union[Attachment, BinaryIO]


@dataclass(frozen=True)
class MessageRequest:
    """Mensagem de email como fornecida pelo chamador.

    O corpo vem de exatamente uma fonte: `component` (renderizado para
    html e text) ou `html`/`text` diretos. A validação em runtime fica em
    api/validators/email.
    """

    from_: str
    to: Recipients
    subject: str
    component: Any = None
    html: str | None = None
    text: str | None = None
    cc: Recipients | None = None
    bcc: Recipients | None = None
    reply_to: Recipients | None = None
    headers: Mapping[str, str] | None = None
    tags: Sequence[Tag] | None = None
    attachments: Sequence[AttachmentEntry] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MessageRequest:
        """Constrói a partir de um mapping com as chaves do wire (`from`, `reply_to`...)."""
        tags = data.get("tags")
        attachments = data.get("attachments")
        return cls(
            from_=data.get("from", data.get("from_", "")),
            to=data.get("to", ""),
            subject=data.get("subject", ""),
            component=data.get("component"),
            html=data.get("html"),
            text=data.get("text"),
            cc=data.get("cc"),
            bcc=data.get("bcc"),
            reply_to=data.get("reply_to"),
            headers=data.get("headers"),
            tags=None if tags is None else tuple(_coerce_tag(tag) for tag in tags),
            attachments=(
                None
                if attachments is None
                else tuple(_coerce_attachment(entry) for entry in attachments)
            ),
        )


def _coerce_tag(tag: Tag | Mapping[str, str]) -> Tag:
    if isinstance(tag, Tag):
        return tag
    return Tag(name=tag.get("name", ""), value=tag.get("value", ""))


def _coerce_attachment(entry: Any) -> AttachmentEntry:
    if isinstance(entry, Mapping):
        return Attachment.from_dict(entry)
    return entry


@dataclass(frozen=True, slots=True)
class NormalizedAttachment:
    """Anexo na forma do wire: content em texto (base64) ou path.

    `size` é o tamanho em bytes do conteúdo binário de origem (antes do
    base64); None para texto do chamador e para path. Não vai para o wire.
    """

    content: str | None = None
    path: str | None = None
    filename: str | Literal[False] | None = None
    size: int | None = None


@dataclass(frozen=True)
class NormalizedMessage:
    """Mensagem após resolução do corpo e normalização dos anexos."""

    from_: str
    to: Recipients
    subject: str
    html: str | None = None
    text: str | None = None
    cc: Recipients | None = None
    bcc: Recipients | None = None
    reply_to: Recipients | None = None
    headers: Mapping[str, str] | None = None
    tags: tuple[Tag, ...] | None = None
    attachments: tuple[NormalizedAttachment, ...] | None = None


@dataclass(frozen=True)
class TemplateComponent:
    """Componente renderizável pelo renderer padrão (Jinja2).

    Attributes:
        name: Nome base do template; `<name>.html` e, se existir, `<name>.txt`
        context: Variáveis disponíveis no template
    """

    name: str
    context: Mapping[str, Any] = field(default_factory=dict)
