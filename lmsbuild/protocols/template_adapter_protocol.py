"""Protocol for template rendering."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TemplateAdapterProtocol(Protocol):
    """Protocol for rendering generated file templates."""

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render a template string with the given context.

        Raises:
            TemplateError: If rendering fails
        """
        ...
