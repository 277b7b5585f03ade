from __future__ import annotations

from typing import Any, ClassVar

from address_formatter.core.factory import PluginFactory
from address_formatter.protocols import ConfigSourceProtocol


class ConfigSourceFactory(PluginFactory[ConfigSourceProtocol]):
    """Registry of the backends a rule database can be read from.

    ``"yaml"`` (the default) reads ``components.yaml`` and
    ``worldwide.yaml`` from a directory or from the bundled package data;
    ``"dict"`` serves component and country trees that are already parsed.
    Any other backend only has to provide ``load_components`` and
    ``load_countries``.

    Example:
        >>> source = ConfigSourceFactory.create()
        >>> source = ConfigSourceFactory.create("yaml", conf_dir="/etc/address-formatter")
        >>> source = ConfigSourceFactory.create(
        ...     "dict", components=[{"name": "city"}], countries=rules
        ... )
    """

    _registry: ClassVar[dict[str, type[ConfigSourceProtocol]]] = {}
    _default_type: ClassVar[str] = "yaml"
    _entity_name: ClassVar[str] = "config source"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        if "yaml" not in cls._registry:
            from address_formatter.data.yaml_source import YAMLConfigSource

            cls._registry["yaml"] = YAMLConfigSource
        if "dict" not in cls._registry:
            from address_formatter.data.base import DictConfigSource

            cls._registry["dict"] = DictConfigSource

    @classmethod
    def create(  # type: ignore[override]
        cls,
        source_type: str | None = None,
        **kwargs: Any,
    ) -> ConfigSourceProtocol:
        """Create the source the formatter builds its templates and aliases from.

        Args:
            source_type: Backend name, "yaml" when None.
            **kwargs: Backend options (``conf_dir`` for "yaml",
                ``components`` / ``countries`` for "dict").

        Raises:
            ConfigurationError: If no backend is registered under that name.
        """
        return super().create(source_type, **kwargs)
