"""Configuration builder.

Turns the parsed rule database (component definitions and country rule
blocks) into a Templates registry and an alias table. Every regular
expression is compiled here, once. Any defect in the configuration is
fatal: it raises ConfigurationError and no formatter gets built.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from address_formatter.core.replace import compile_replace_rules
from address_formatter.data.constants import DEFAULT_KEY
from address_formatter.models.country import CountryCode
from address_formatter.models.enums import Component
from address_formatter.models.errors import ConfigurationError
from address_formatter.templates.models import NewComponent, Template, Templates

logger = logging.getLogger(__name__)


class ConfigurationBuilder:
    """Builds the Templates registry and alias table from parsed configuration.

    Countries declaring ``use_country`` inherit the compiled rules of
    another country. They are resolved in a second phase, after all
    concrete countries are built; only one level of inheritance is
    supported.

    Example:
        >>> builder = ConfigurationBuilder(components, countries)
        >>> templates, aliases = builder.build()
    """

    def __init__(
        self,
        components: Iterable[Mapping[str, Any]],
        countries: Mapping[Any, Any],
    ) -> None:
        """Initialize the builder.

        Args:
            components: Sequence of ``{name, aliases}`` component definitions.
            countries: Mapping of country code (plus ``default``) to rule block.
        """
        self._components = components
        self._countries = countries

    def build(self) -> tuple[Templates, dict[str, Component]]:
        """Build both the templates registry and the alias table."""
        aliases = self.build_aliases()
        templates = self.build_templates()
        logger.debug(
            "Built configuration: %d aliases, %d country templates (%d fallbacks)",
            len(aliases),
            len(templates.templates_by_country),
            len(templates.fallback_templates_by_country),
        )
        return templates, aliases

    # -------------------------------------------------------------------------
    # Aliases
    # -------------------------------------------------------------------------

    def build_aliases(self) -> dict[str, Component]:
        """Build the alias table (raw field name -> Component).

        Raises:
            ConfigurationError: On unknown component names or an alias
                declared for two different components.
        """
        aliases: dict[str, Component] = {}
        for definition in self._components:
            if not isinstance(definition, Mapping) or "name" not in definition:
                raise ConfigurationError.create(
                    "component definition without a name: {entry}", entry=repr(definition)
                )
            name = str(definition["name"])
            component = Component.from_name(name)
            if component is None:
                raise ConfigurationError.create(
                    "{name} is not a valid component", name=name
                )

            for alias in definition.get("aliases") or ():
                alias = str(alias)
                existing = aliases.get(alias)
                if existing is not None and existing is not component:
                    raise ConfigurationError.create(
                        "alias {alias} is declared for both {first} and {second}",
                        alias=alias,
                        first=existing.value,
                        second=component.value,
                    )
                aliases[alias] = component
        return aliases

    # -------------------------------------------------------------------------
    # Templates
    # -------------------------------------------------------------------------

    def build_templates(self) -> Templates:
        """Build the Templates registry.

        Raises:
            ConfigurationError: On a missing default block, a country without
                ``address_template``, invalid rules or unresolvable inheritance.
        """
        if not isinstance(self._countries, Mapping):
            raise ConfigurationError.create("country rules must be a mapping")

        default_template, fallback_template = self._build_defaults()

        templates: dict[CountryCode, Template] = {}
        fallbacks: dict[CountryCode, Template] = {}
        # child -> (raw key, parent, rule block), resolved once all parents exist
        deferred: dict[CountryCode, tuple[str, CountryCode, Mapping[str, Any]]] = {}

        for key, block in self._countries.items():
            if key == DEFAULT_KEY:
                continue
            if not CountryCode.is_valid(key):
                logger.debug("Skipping non-country configuration key %r", key)
                continue

            country_code = CountryCode.parse(key)
            if country_code in templates or country_code in deferred:
                raise ConfigurationError.create(
                    "country {country} is defined more than once", country=str(country_code)
                )
            if not isinstance(block, Mapping):
                raise ConfigurationError.create(
                    "rules for country {country} must be a mapping", country=key
                )

            parent = block.get("use_country")
            if parent is not None:
                if not CountryCode.is_valid(parent):
                    raise ConfigurationError.create(
                        "country {country} uses an invalid country {parent}",
                        country=key,
                        parent=repr(parent),
                    )
                deferred[country_code] = (key, CountryCode.parse(parent), block)
                continue

            templates[country_code], fallback = self._build_country(key, block)
            if fallback is not None:
                fallbacks[country_code] = fallback

        inherited, inherited_fallbacks = self._resolve_inheritance(templates, fallbacks, deferred)
        templates.update(inherited)
        fallbacks.update(inherited_fallbacks)

        return Templates(
            default_template=default_template,
            fallback_template=fallback_template,
            templates_by_country=templates,
            fallback_templates_by_country=fallbacks,
        )

    def _build_defaults(self) -> tuple[Template, Template]:
        block = self._countries.get(DEFAULT_KEY)
        if not isinstance(block, Mapping):
            raise ConfigurationError.create("no default rules provided")

        address_template = block.get("address_template")
        if not isinstance(address_template, str):
            raise ConfigurationError.create("no default address_template provided")
        fallback_template = block.get("fallback_template")
        if not isinstance(fallback_template, str):
            raise ConfigurationError.create("no default fallback_template provided")

        replace = compile_replace_rules(block.get("replace"), DEFAULT_KEY)
        postformat = compile_replace_rules(
            block.get("postformat_replace"), DEFAULT_KEY, scoped=False
        )
        return (
            Template(address_template, replace, postformat),
            Template(fallback_template, replace, postformat),
        )

    def _build_country(
        self, key: str, block: Mapping[str, Any]
    ) -> tuple[Template, Template | None]:
        """Compile a concrete country block into its template and optional fallback."""
        address_template = block.get("address_template")
        if not isinstance(address_template, str):
            raise ConfigurationError.create(
                "no address_template found for country {country}", country=key
            )

        template = Template(
            address_template=address_template,
            replace=compile_replace_rules(block.get("replace"), key),
            postformat_replace=compile_replace_rules(
                block.get("postformat_replace"), key, scoped=False
            ),
            change_country=self._change_country(key, block),
            add_component=self._add_component(key, block),
        )

        fallback_template = block.get("fallback_template")
        if fallback_template is None:
            return template, None
        if not isinstance(fallback_template, str):
            raise ConfigurationError.create(
                "fallback_template of country {country} must be a string", country=key
            )
        return template, dataclasses.replace(template, address_template=fallback_template)

    def _resolve_inheritance(
        self,
        templates: Mapping[CountryCode, Template],
        fallbacks: Mapping[CountryCode, Template],
        deferred: Mapping[CountryCode, tuple[str, CountryCode, Mapping[str, Any]]],
    ) -> tuple[dict[CountryCode, Template], dict[CountryCode, Template]]:
        """Copy each parent's compiled templates and overlay the child's directives."""
        inherited: dict[CountryCode, Template] = {}
        inherited_fallbacks: dict[CountryCode, Template] = {}

        for country_code, (key, parent, block) in deferred.items():
            if parent == country_code:
                raise ConfigurationError.create(
                    "country {country} uses itself", country=key
                )
            if parent in deferred:
                raise ConfigurationError.create(
                    "country {country} uses {parent} which itself uses another country",
                    country=key,
                    parent=str(parent),
                )
            if parent not in templates:
                raise ConfigurationError.create(
                    "country {country} uses unknown country {parent}",
                    country=key,
                    parent=str(parent),
                )

            # change_country is always the child's own; add_component only when it sets one
            overlay: dict[str, Any] = {"change_country": self._change_country(key, block)}
            add_component = self._add_component(key, block)
            if add_component is not None:
                overlay["add_component"] = add_component
            inherited[country_code] = dataclasses.replace(templates[parent], **overlay)
            if parent in fallbacks:
                inherited_fallbacks[country_code] = dataclasses.replace(
                    fallbacks[parent], **overlay
                )

        return inherited, inherited_fallbacks

    @staticmethod
    def _change_country(key: str, block: Mapping[str, Any]) -> str | None:
        change_country = block.get("change_country")
        if change_country is not None and not isinstance(change_country, str):
            raise ConfigurationError.create(
                "change_country of country {country} must be a string", country=key
            )
        return change_country

    @staticmethod
    def _add_component(key: str, block: Mapping[str, Any]) -> NewComponent | None:
        raw = block.get("add_component")
        if raw is None:
            return None
        if not isinstance(raw, str) or "=" not in raw:
            raise ConfigurationError.create(
                "add_component of country {country} must be 'component=value', got {value}",
                country=key,
                value=repr(raw),
            )
        name, value = raw.split("=", 1)
        component = Component.from_name(name)
        if component is None:
            raise ConfigurationError.create(
                "in add_component of country {country}, '{name}' is not a valid component",
                country=key,
                name=name,
            )
        return NewComponent(component=component, value=value)


def build_configuration(
    components: Iterable[Mapping[str, Any]],
    countries: Mapping[Any, Any],
) -> tuple[Templates, dict[str, Component]]:
    """Build the Templates registry and alias table from parsed configuration.

    Convenience wrapper around ``ConfigurationBuilder(...).build()``.
    """
    return ConfigurationBuilder(components, countries).build()
