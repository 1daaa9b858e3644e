"""Testes da superfície pública: send() e Resend.emails.send()."""

from __future__ import annotations

import io
import json

import httpx
import pytest

from api.connectors.email import EmailHttpClient
from api.validators.email import MAX_ATTACHMENTS_SIZE_BYTES
from app import Resend, send
from app.infra.http import HttpClientConfig
from app.protocols.models import Attachment, MessageRequest
from config.settings import EmailSettings
from tests.fakes.fake_renderer import FakeEmailHttpClient, FakeRenderer
from utils.errors import TransportError, ValidationError


class RecordingTransport:
    """Monta EmailHttpClient sobre MockTransport e conta chamadas de rede."""

    def __init__(self, status_code: int = 200, body: dict | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._body = body if body is not None else {"id": "49a3999c-0ce1-4ea6-ab68-afcd6dc2e794"}

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self._status_code, json=self._body)

    def client(self) -> EmailHttpClient:
        return EmailHttpClient(HttpClientConfig(transport=httpx.MockTransport(self._handle)))


SETTINGS = EmailSettings(api_key="env_key", api_base_url="https://api.resend.com")


class TestSend:
    """Cenários ponta a ponta do envio."""

    @pytest.mark.asyncio
    async def test_end_to_end_html_message(self) -> None:
        transport = RecordingTransport()

        result = await send(
            {"from": "a@x.com", "to": "b@x.com", "subject": "hi", "html": "<p>hi</p>"},
            "key123",
            http_client=transport.client(),
            settings=SETTINGS,
        )

        assert result == {"id": "49a3999c-0ce1-4ea6-ab68-afcd6dc2e794"}
        assert len(transport.requests) == 1
        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.resend.com/emails"
        assert request.headers["Authorization"] == "Bearer key123"
        assert json.loads(request.content) == {
            "from": "a@x.com",
            "to": "b@x.com",
            "subject": "hi",
            "html": "<p>hi</p>",
        }

    @pytest.mark.asyncio
    async def test_caller_authorization_header_wins(self) -> None:
        transport = RecordingTransport()

        await send(
            {
                "from": "a@x.com",
                "to": "b@x.com",
                "subject": "hi",
                "text": "hi",
                "headers": {"Authorization": "X"},
            },
            "key123",
            http_client=transport.client(),
            settings=SETTINGS,
        )

        assert transport.requests[0].headers.get_list("Authorization") == ["X"]

    @pytest.mark.asyncio
    async def test_missing_body_makes_no_network_call(self) -> None:
        transport = RecordingTransport()

        with pytest.raises(ValidationError):
            await send(
                {"from": "a@x.com", "to": "b@x.com", "subject": "hi"},
                "key123",
                http_client=transport.client(),
                settings=SETTINGS,
            )

        assert len(transport.requests) == 0

    @pytest.mark.asyncio
    async def test_remote_error_body_is_returned(self) -> None:
        error_body = {"statusCode": 403, "name": "invalid_api_key", "message": "API key is invalid"}
        transport = RecordingTransport(status_code=403, body=error_body)

        result = await send(
            MessageRequest(from_="a@x.com", to="b@x.com", subject="hi", text="hi"),
            "bad",
            http_client=transport.client(),
            settings=SETTINGS,
        )

        assert result == error_body

    @pytest.mark.asyncio
    async def test_mapping_attachments_are_normalized(self) -> None:
        transport = RecordingTransport()

        await send(
            {
                "from": "a@x.com",
                "to": "b@x.com",
                "subject": "hi",
                "text": "hi",
                "attachments": [
                    {"content": b"abc", "filename": "a.txt"},
                    {"path": "https://x.com/b.pdf"},
                ],
            },
            "key123",
            http_client=transport.client(),
            settings=SETTINGS,
        )

        body = json.loads(transport.requests[0].content)
        assert body["attachments"] == [
            {"content": "YWJj", "filename": "a.txt"},
            {"path": "https://x.com/b.pdf"},
        ]

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self) -> None:
        def _fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        client = EmailHttpClient(HttpClientConfig(transport=httpx.MockTransport(_fail)))

        with pytest.raises(TransportError):
            await send(
                {"from": "a@x.com", "to": "b@x.com", "subject": "hi", "text": "hi"},
                "key123",
                http_client=client,
                settings=SETTINGS,
            )


class TestResend:
    """Testa o wrapper orientado a objeto."""

    @pytest.mark.asyncio
    async def test_emails_send_delegates_to_send(self) -> None:
        http_client = FakeEmailHttpClient(response={"id": "em_1"})
        renderer = FakeRenderer()
        client = Resend("key123", renderer=renderer, http_client=http_client, settings=SETTINGS)

        via_method = await client.send(
            MessageRequest(from_="a@x.com", to="b@x.com", subject="hi", component=object())
        )
        via_group = await client.emails.send(
            {
                "from": "a@x.com",
                "to": "b@x.com",
                "subject": "hi",
                "attachments": [Attachment(path="https://x.com/a")],
                "html": "<p>x</p>",
            }
        )

        assert via_method == via_group == {"id": "em_1"}
        assert [sent["api_key"] for sent in http_client.sent] == ["key123", "key123"]
        assert http_client.sent[0]["endpoint"] == "https://api.resend.com/emails"
        assert http_client.sent[0]["payload"]["text"] == "Olá"

    def test_api_key_falls_back_to_settings(self) -> None:
        client = Resend(settings=SETTINGS)
        assert client._api_key == "env_key"

    def test_missing_api_key_raises(self) -> None:
        with pytest.raises(ValidationError, match="api_key"):
            Resend(settings=EmailSettings(api_key=""))


class TestSendRejectsBeforeSideEffects:
    """Entradas inválidas viram ValidationError antes de renderizar ou enviar."""

    @pytest.mark.asyncio
    async def test_unsupported_attachment_content(self) -> None:
        renderer = FakeRenderer()
        http_client = FakeEmailHttpClient()

        with pytest.raises(ValidationError) as exc:
            await send(
                MessageRequest(
                    from_="a@x.com",
                    to="b@x.com",
                    subject="hi",
                    component=object(),
                    attachments=[Attachment(content=12345)],  # type: ignore[arg-type]
                ),
                "key123",
                renderer=renderer,
                http_client=http_client,
                settings=SETTINGS,
            )

        assert exc.value.index == 0
        assert renderer.calls == []
        assert http_client.sent == []

    @pytest.mark.asyncio
    async def test_non_ascii_header_value(self) -> None:
        transport = RecordingTransport()

        with pytest.raises(ValidationError) as exc:
            await send(
                MessageRequest(
                    from_="a@x.com",
                    to="b@x.com",
                    subject="hi",
                    text="hi",
                    headers={"X-Note": "Olá"},
                ),
                "key123",
                http_client=transport.client(),
                settings=SETTINGS,
            )

        assert exc.value.field == "headers"
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_non_string_from(self) -> None:
        http_client = FakeEmailHttpClient()

        with pytest.raises(ValidationError) as exc:
            await send(
                {"from": ["a@x.com"], "to": "b@x.com", "subject": "hi", "text": "hi"},
                "key123",
                http_client=http_client,
                settings=SETTINGS,
            )

        assert exc.value.field == "from"
        assert http_client.sent == []


class TestSendAttachmentSize:
    """O limite de tamanho vale para os bytes de origem, não para o base64."""

    @pytest.mark.asyncio
    async def test_binary_below_limit_whose_base64_exceeds_it_is_sent(self) -> None:
        http_client = FakeEmailHttpClient()
        data = b"\0" * (31 * 1024 * 1024)

        await send(
            MessageRequest(
                from_="a@x.com",
                to="b@x.com",
                subject="hi",
                text="hi",
                attachments=[Attachment(content=data, filename="big.bin")],
            ),
            "key123",
            http_client=http_client,
            settings=SETTINGS,
        )

        content = http_client.sent[0]["payload"]["attachments"][0]["content"]
        assert len(content) > MAX_ATTACHMENTS_SIZE_BYTES
        assert "size" not in http_client.sent[0]["payload"]["attachments"][0]

    @pytest.mark.asyncio
    async def test_binary_above_limit_is_rejected(self) -> None:
        http_client = FakeEmailHttpClient()

        with pytest.raises(ValidationError, match="exceed maximum") as exc:
            await send(
                MessageRequest(
                    from_="a@x.com",
                    to="b@x.com",
                    subject="hi",
                    text="hi",
                    attachments=[
                        Attachment(content=io.BytesIO(b"\0" * (MAX_ATTACHMENTS_SIZE_BYTES - 10))),
                        Attachment(content=b"\0" * 11),
                    ],
                ),
                "key123",
                http_client=http_client,
                settings=SETTINGS,
            )

        assert exc.value.field == "attachments"
        assert http_client.sent == []

    @pytest.mark.asyncio
    async def test_readable_attachment_content_is_sent_as_base64(self) -> None:
        http_client = FakeEmailHttpClient()

        await send(
            MessageRequest(
                from_="a@x.com",
                to="b@x.com",
                subject="hi",
                text="hi",
                attachments=[Attachment(content=io.BytesIO(b"abc"), filename="a.txt")],
            ),
            "key123",
            http_client=http_client,
            settings=SETTINGS,
        )

        assert http_client.sent[0]["payload"]["attachments"] == [
            {"content": "YWJj", "filename": "a.txt"},
        ]
