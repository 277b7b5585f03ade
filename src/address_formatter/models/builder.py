"""Address construction from arbitrary key/value data.

This module maps non-canonical field names onto Components through the
alias table of the rule database, and provides a fluent builder on top.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Self

from address_formatter.models.address import Address
from address_formatter.models.enums import Component

logger = logging.getLogger(__name__)

Pairs = Iterable[tuple[str, Any]] | Mapping[str, Any]


def _coerce_value(value: Any) -> str | None:
    """Turn an input value into a component value, or None if it is blank."""
    if value is None:
        return None
    if isinstance(value, float) and value != value:  # NaN from pandas rows
        return None
    text = value if isinstance(value, str) else str(value)
    return text if text.strip() else None


def build_address(
    pairs: Pairs,
    aliases: Mapping[str, Component] | None = None,
) -> Address:
    """Build an Address from ``(name, value)`` pairs.

    Canonical component names always win and are assigned directly. Alias
    names only fill a component that is still empty (first writer wins).
    Values under names that are neither canonical nor aliased are joined
    with ", " in input order into the attention component.

    Args:
        pairs: Mapping or ordered sequence of (field name, value).
        aliases: Alias table (raw name -> Component).

    Returns:
        The built Address. This never fails; blank values are skipped.
    """
    aliases = aliases or {}
    items = pairs.items() if isinstance(pairs, Mapping) else pairs

    address = Address()
    unknown: list[str] = []
    for name, raw_value in items:
        value = _coerce_value(raw_value)
        if value is None:
            continue

        component = Component.from_name(name)
        if component is not None:
            address[component] = value
            continue

        alias = aliases.get(name)
        if alias is not None:
            if address[alias] is None:
                address[alias] = value
            continue

        unknown.append(value)

    if unknown:
        logger.debug("Storing %d unknown value(s) in attention", len(unknown))
        address[Component.ATTENTION] = ", ".join(unknown)

    return address


class AddressBuilder:
    """Builder for programmatic Address construction.

    Collects fields in call order and resolves them with ``build_address``
    when ``build()`` is called, so aliases and unknown fields behave the
    same way as in bulk input.

    Example:
        >>> address = (
        ...     AddressBuilder()
        ...     .with_house_number("17")
        ...     .with_road("Rue du Médecin-Colonel Calbairac")
        ...     .with_postcode("31000")
        ...     .with_city("Toulouse")
        ...     .with_country_code("FR")
        ...     .build()
        ... )
    """

    def __init__(self, aliases: Mapping[str, Component] | None = None) -> None:
        self._aliases = aliases
        self._pairs: list[tuple[str, Any]] = []

    def with_house_number(self, number: str) -> Self:
        """Set the house number."""
        return self.with_field(Component.HOUSE_NUMBER, number)

    def with_house(self, name: str) -> Self:
        """Set the house or building name."""
        return self.with_field(Component.HOUSE, name)

    def with_road(self, road: str) -> Self:
        """Set the road name."""
        return self.with_field(Component.ROAD, road)

    def with_city(self, city: str) -> Self:
        return self.with_field(Component.CITY, city)

    def with_postcode(self, postcode: str) -> Self:
        return self.with_field(Component.POSTCODE, postcode)

    def with_state(self, state: str) -> Self:
        return self.with_field(Component.STATE, state)

    def with_country(self, country: str) -> Self:
        return self.with_field(Component.COUNTRY, country)

    def with_country_code(self, country_code: str) -> Self:
        """Set the ISO country code (e.g. 'FR')."""
        return self.with_field(Component.COUNTRY_CODE, country_code)

    def with_field(self, field: str | Component, value: Any) -> Self:
        """Set a field by canonical name, alias or Component.

        Unknown names are accepted and end up in the attention component.
        """
        name = field.value if isinstance(field, Component) else field
        self._pairs.append((name, value))
        return self

    def with_pairs(self, pairs: Pairs) -> Self:
        """Add several fields at once, keeping their order."""
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        self._pairs.extend(items)
        return self

    def build(self) -> Address:
        """Build the Address object."""
        return build_address(self._pairs, self._aliases)

    def reset(self) -> Self:
        """Reset the builder to empty state."""
        self._pairs = []
        return self
