from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from address_formatter.models import Address

# Decides whether an address holds enough data for its country template
MinimumComponentsPredicate = Callable[["Address"], bool]


@runtime_checkable
class TemplateRendererProtocol(Protocol):
    """Protocol for template rendering implementations.

    Implementations render a mustache-style address template against the
    values of an address, supporting the ``{{#first}} a || b {{/first}}`` helper.
    """

    def render(self, template: str, context: Mapping[str, str]) -> str:
        """Render a template.

        Args:
            template: Template text.
            context: Component name -> value, for the components that are set.

        Returns:
            The raw rendered text, before any cleanup.

        Raises:
            TemplateRenderError: If the template cannot be rendered.
        """
        ...


@runtime_checkable
class ConfigSourceProtocol(Protocol):
    """Protocol for rule database sources.

    Implementations provide the parsed configuration tree, supporting
    different backends (bundled YAML files, a custom directory, in-memory
    data, etc.).
    """

    def load_components(self) -> Sequence[Mapping[str, Any]]:
        """Load the component definitions.

        Returns:
            Sequence of ``{"name": ..., "aliases": [...]}`` mappings.

        Raises:
            ConfigurationError: If the definitions cannot be read.
        """
        ...

    def load_countries(self) -> Mapping[Any, Any]:
        """Load the per-country rule blocks.

        Returns:
            Mapping of country code (and ``default``) to rule block.

        Raises:
            ConfigurationError: If the rules cannot be read.
        """
        ...
