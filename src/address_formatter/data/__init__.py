"""Rule database sources.

This package provides the sources of the address formatting rule
database (component aliases and per-country templates) and the bundled
YAML files themselves.
"""

from __future__ import annotations

from address_formatter.data.base import BaseConfigSource, DictConfigSource
from address_formatter.data.factory import ConfigSourceFactory
from address_formatter.data.yaml_source import YAMLConfigSource

__all__ = [
    "BaseConfigSource",
    "ConfigSourceFactory",
    "DictConfigSource",
    "YAMLConfigSource",
]
