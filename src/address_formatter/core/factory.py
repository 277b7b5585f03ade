"""Named plugin registries.

Renderers and configuration sources are chosen by name, so a caller can
swap the templating engine or the rule database backend without touching
the formatter. Each registry is a ``PluginFactory`` subclass owning a
class-level table of name -> implementation class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from address_formatter.models.errors import ConfigurationError

T = TypeVar("T")


class PluginFactory(ABC, Generic[T]):
    """Registry of implementation classes for one plugin kind.

    Subclasses declare their own ``_registry`` dict, the ``_default_type``
    used when no name is given, an ``_entity_name`` for error messages and
    ``_ensure_defaults_registered``, which imports and registers the
    built-in implementations on first use.

    Example subclass:
        class RendererFactory(PluginFactory[TemplateRendererProtocol]):
            _registry: ClassVar[dict[str, type[TemplateRendererProtocol]]] = {}
            _default_type: ClassVar[str] = "pystache"
            _entity_name: ClassVar[str] = "renderer"

            @classmethod
            def _ensure_defaults_registered(cls) -> None:
                if "pystache" not in cls._registry:
                    from ... import PystacheRenderer
                    cls._registry["pystache"] = PystacheRenderer
    """

    _registry: ClassVar[dict[str, type[Any]]]
    _default_type: ClassVar[str]
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Register the built-in implementations if they are missing."""
        ...

    @classmethod
    def register(cls, name: str, impl_class: type[T]) -> None:
        """Make ``impl_class`` available under ``name``, replacing any previous entry."""
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Forget ``name``; unknown names are ignored."""
        cls._registry.pop(name, None)

    @classmethod
    def get_class(cls, name: str | None = None) -> type[T]:
        """Look up the implementation class registered under ``name``.

        Args:
            name: Registered name, or None for the default type.

        Raises:
            ConfigurationError: If nothing is registered under that name.
        """
        cls._ensure_defaults_registered()
        type_name = cls._default_type if name is None else name

        impl_class = cls._registry.get(type_name)
        if impl_class is None:
            raise ConfigurationError.create(
                "Unknown {entity} type: {name}. Available types: {available}",
                entity=cls._entity_name,
                name=type_name,
                available=", ".join(sorted(cls._registry)),
            )
        return impl_class

    @classmethod
    def create(cls, name: str | None = None, **kwargs: Any) -> T:
        """Instantiate the implementation registered under ``name``.

        Keyword arguments go to the implementation's constructor.
        """
        return cls.get_class(name)(**kwargs)

    @classmethod
    def available_types(cls) -> list[str]:
        """Registered names, sorted."""
        cls._ensure_defaults_registered()
        return sorted(cls._registry)
