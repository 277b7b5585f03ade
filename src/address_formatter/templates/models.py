"""Template rule sets and the template registry.

All of these are built once by the configuration builder and never
mutated afterwards, so they are safe to share between threads.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from address_formatter.core.replace import ReplaceRule
from address_formatter.models.country import CountryCode
from address_formatter.models.enums import Component


@dataclass(frozen=True)
class NewComponent:
    """An ``add_component`` directive: set ``component`` to a literal value."""

    component: Component
    value: str


@dataclass(frozen=True)
class Template:
    """Rendering and transformation rules for one country (or the defaults).

    Attributes:
        address_template: Mustache template of the address block.
        replace: Rules applied to component values before rendering.
        postformat_replace: Rules applied to the rendered text.
        change_country: New value for the country component, may reference
            another component as ``$name``.
        add_component: Component to set before rendering.
    """

    address_template: str
    replace: tuple[ReplaceRule, ...] = ()
    postformat_replace: tuple[ReplaceRule, ...] = ()
    change_country: str | None = None
    add_component: NewComponent | None = None


@dataclass(frozen=True)
class Templates:
    """Registry of every template of the rule database."""

    default_template: Template
    fallback_template: Template
    templates_by_country: Mapping[CountryCode, Template] = field(default_factory=dict)
    fallback_templates_by_country: Mapping[CountryCode, Template] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "templates_by_country", MappingProxyType(dict(self.templates_by_country))
        )
        object.__setattr__(
            self,
            "fallback_templates_by_country",
            MappingProxyType(dict(self.fallback_templates_by_country)),
        )

    def get(self, country_code: CountryCode) -> Template | None:
        """Template of a country, or None if the country has no rules."""
        return self.templates_by_country.get(country_code)

    def get_fallback(self, country_code: CountryCode) -> Template:
        """Fallback template of a country, defaulting to the global one."""
        return self.fallback_templates_by_country.get(country_code, self.fallback_template)

    @property
    def countries(self) -> list[CountryCode]:
        """Country codes with a template, sorted."""
        return sorted(self.templates_by_country, key=str)
