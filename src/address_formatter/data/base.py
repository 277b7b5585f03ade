from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any


class BaseConfigSource(ABC):
    """Abstract base class for rule database sources.

    Provides lazy, cached loading: each part of the configuration is read
    at most once, on first access.
    """

    def __init__(self) -> None:
        self._components: Sequence[Mapping[str, Any]] | None = None
        self._countries: Mapping[Any, Any] | None = None

    @abstractmethod
    def _load_components(self) -> Sequence[Mapping[str, Any]]:
        """Read the component definitions from the underlying source."""
        ...

    @abstractmethod
    def _load_countries(self) -> Mapping[Any, Any]:
        """Read the per-country rule blocks from the underlying source."""
        ...

    def load_components(self) -> Sequence[Mapping[str, Any]]:
        """Get the component definitions, loading them on first access.

        Returns:
            Sequence of ``{"name": ..., "aliases": [...]}`` mappings.
        """
        if self._components is None:
            self._components = self._load_components()
        return self._components

    def load_countries(self) -> Mapping[Any, Any]:
        """Get the per-country rule blocks, loading them on first access.

        Returns:
            Mapping of country code (and ``default``) to rule block.
        """
        if self._countries is None:
            self._countries = self._load_countries()
        return self._countries


class DictConfigSource(BaseConfigSource):
    """Config source serving an already parsed, in-memory configuration.

    Example:
        >>> source = DictConfigSource(
        ...     components=[{"name": "city", "aliases": ["town"]}],
        ...     countries={"default": {"address_template": "{{{city}}}",
        ...                            "fallback_template": "{{{city}}}"}},
        ... )
    """

    def __init__(
        self,
        components: Sequence[Mapping[str, Any]] | None = None,
        countries: Mapping[Any, Any] | None = None,
    ) -> None:
        super().__init__()
        self._raw_components = list(components or [])
        self._raw_countries = dict(countries or {})

    def _load_components(self) -> Sequence[Mapping[str, Any]]:
        return self._raw_components

    def _load_countries(self) -> Mapping[Any, Any]:
        return self._raw_countries
