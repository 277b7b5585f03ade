from __future__ import annotations

from typing import Any, ClassVar

from address_formatter.core.factory import PluginFactory
from address_formatter.protocols import TemplateRendererProtocol


class RendererFactory(PluginFactory[TemplateRendererProtocol]):
    """Factory for creating template renderer instances.

    Supports registration of custom renderer types and creation of
    renderers by type name.

    Example:
        >>> renderer = RendererFactory.create("pystache")

        # Register custom renderer
        >>> RendererFactory.register("chevron", ChevronRenderer)
        >>> renderer = RendererFactory.create("chevron")
    """

    _registry: ClassVar[dict[str, type[TemplateRendererProtocol]]] = {}
    _default_type: ClassVar[str] = "pystache"
    _entity_name: ClassVar[str] = "renderer"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default renderers are registered."""
        if "pystache" not in cls._registry:
            from address_formatter.renderers.pystache_renderer import PystacheRenderer

            cls._registry["pystache"] = PystacheRenderer

    @classmethod
    def create(  # type: ignore[override]
        cls,
        renderer_type: str | None = None,
        **kwargs: Any,
    ) -> TemplateRendererProtocol:
        """Create a renderer instance.

        Args:
            renderer_type: Type of renderer to create. Defaults to "pystache".
            **kwargs: Arguments to pass to the renderer constructor.

        Returns:
            Renderer instance.

        Raises:
            ConfigurationError: If the renderer type is not registered.
        """
        return super().create(renderer_type, **kwargs)
