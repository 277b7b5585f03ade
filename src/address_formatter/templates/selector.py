"""Template selection."""

from __future__ import annotations

import logging

from address_formatter.models.address import Address
from address_formatter.models.country import CountryCode
from address_formatter.models.enums import Component
from address_formatter.protocols import MinimumComponentsPredicate
from address_formatter.templates.models import Template, Templates

logger = logging.getLogger(__name__)

MINIMUM_COMPONENTS: tuple[Component, ...] = (Component.ROAD, Component.CITY)


def has_minimum_components(address: Address) -> bool:
    """Default completeness predicate: the address has a road or a city."""
    return any(address.get(component) for component in MINIMUM_COMPONENTS)


def select_template(
    templates: Templates,
    country_code: CountryCode | None,
    address: Address,
    has_minimum: MinimumComponentsPredicate = has_minimum_components,
) -> Template:
    """Pick the template used to format ``address``.

    Args:
        templates: Template registry.
        country_code: Resolved country, or None when unknown.
        address: Address to format.
        has_minimum: Predicate telling whether the address is complete
            enough for a country-specific template.

    Returns:
        - The default template when the country is unknown
        - The country's fallback (or the global fallback) when the address
          lacks the minimum components
        - The country's template otherwise, or the default template when
          the country has no rules
    """
    if country_code is None:
        logger.debug("Unknown country, using the default template")
        return templates.default_template

    if not has_minimum(address):
        logger.debug("Address too sparse for %s, using the fallback template", country_code)
        return templates.get_fallback(country_code)

    template = templates.get(country_code)
    if template is None:
        logger.debug("No rules for %s, using the default template", country_code)
        return templates.default_template

    logger.debug("Using the %s template", country_code)
    return template
