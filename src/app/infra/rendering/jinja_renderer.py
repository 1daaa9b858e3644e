"""Renderer padrão de componentes de email sobre Jinja2.

Convenção de templates:
- `<name>.html`: versão HTML (autoescape ativo)
- `<name>.txt`: versão texto; se ausente, o HTML com as tags removidas
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound, select_autoescape
from markupsafe import Markup

from app.protocols.models import TemplateComponent
from utils.errors import RenderError

if TYPE_CHECKING:
    from config.settings import EmailSettings

logger = logging.getLogger(__name__)


def create_render_environment_from_folder(top_dir: Path) -> Environment:
    """Cria Environment assíncrono com autoescape para html/xml."""
    if not top_dir.is_dir():
        raise RenderError(f"templates_dir não é um diretório: {top_dir}")
    return Environment(
        loader=FileSystemLoader(top_dir),
        autoescape=select_autoescape(["html", "xml"]),
        enable_async=True,
    )


class JinjaRenderer:
    """Implementação de RendererProtocol com templates Jinja2."""

    def __init__(self, env: Environment) -> None:
        self._env = env

    @classmethod
    def from_folder(cls, top_dir: str | Path) -> JinjaRenderer:
        return cls(create_render_environment_from_folder(Path(top_dir)))

    async def render(self, component: Any, *, plain_text: bool = False) -> str:
        """Renderiza o componente em HTML ou em texto puro.

        Raises:
            RenderError: Componente não suportado ou falha do Jinja2
        """
        if not isinstance(component, TemplateComponent):
            raise RenderError(
                f"componente não suportado: {type(component).__name__}"
            )

        try:
            if plain_text:
                return await self._render_text(component)
            return await self._render(f"{component.name}.html", component.context)
        except TemplateError as exc:
            raise RenderError(f"falha ao renderizar {component.name!r}") from exc

    async def _render_text(self, component: TemplateComponent) -> str:
        try:
            return await self._render(f"{component.name}.txt", component.context)
        except TemplateNotFound:
            logger.debug(
                "email_text_template_missing",
                extra={"template": component.name},
            )
        html = await self._render(f"{component.name}.html", component.context)
        return Markup(html).striptags()

    async def _render(self, template_name: str, context: Any) -> str:
        template = self._env.get_template(template_name)
        return await template.render_async(dict(context))


def create_default_renderer(settings: EmailSettings | None = None) -> JinjaRenderer:
    """Factory do renderer padrão a partir de RESEND_TEMPLATES_DIR.

    Raises:
        RenderError: Se o diretório de templates não estiver configurado
    """
    from config.settings import get_email_settings

    email = settings or get_email_settings()
    if not email.templates_dir:
        raise RenderError("RESEND_TEMPLATES_DIR não configurado")
    return JinjaRenderer.from_folder(email.templates_dir)
