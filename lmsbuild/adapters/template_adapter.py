"""Template adapter for abstracting template rendering operations."""

import logging
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError as JinjaTemplateError

from lmsbuild.core.errors import create_template_error
from lmsbuild.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)


class TemplateAdapter:
    """Jinja2 template adapter implementation."""

    def __init__(self, trim_blocks: bool = True, lstrip_blocks: bool = True):
        """Initialize the Jinja2 template adapter.

        Args:
            trim_blocks: Remove newlines after block tags
            lstrip_blocks: Strip leading whitespace from block tags
        """
        self.env = Environment(
            trim_blocks=trim_blocks,
            lstrip_blocks=lstrip_blocks,
            keep_trailing_newline=True,
            undefined=StrictUndefined,  # Raise errors for undefined variables
            autoescape=False,
        )

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render a Jinja2 template string with the given context."""
        try:
            template = self.env.from_string(template_string)
            return template.render(context)
        except JinjaTemplateError as e:
            error = create_template_error(
                template_string[:40],
                "render_string",
                e,
                {"context_keys": sorted(context.keys())},
            )
            exc_info = logging.getLogger().isEnabledFor(logging.DEBUG)
            logger.error("template_string_render_error", error=str(e), exc_info=exc_info)
            raise error from e


def create_template_adapter() -> TemplateAdapter:
    """Create a template adapter with default settings."""
    return TemplateAdapter()
