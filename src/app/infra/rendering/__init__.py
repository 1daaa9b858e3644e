"""Renderers de componentes de email."""

from .jinja_renderer import (
    JinjaRenderer,
    create_default_renderer,
    create_render_environment_from_folder,
)

__all__ = [
    "JinjaRenderer",
    "create_default_renderer",
    "create_render_environment_from_folder",
]
