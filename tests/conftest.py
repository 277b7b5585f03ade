"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest
from hypothesis import Verbosity, settings

from address_formatter import AddressFormatter

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


# A small rule database, independent from the bundled YAML files
SMALL_COMPONENTS: list[dict[str, Any]] = [
    {"name": "house_number", "aliases": ["street_number"]},
    {"name": "road", "aliases": ["street", "footway"]},
    {"name": "city", "aliases": ["town", "municipality"]},
    {"name": "county"},
    {"name": "postcode", "aliases": ["postal_code"]},
    {"name": "state", "aliases": ["province"]},
    {"name": "country"},
    {"name": "country_code"},
]

SMALL_COUNTRIES: dict[Any, Any] = {
    "generic": "{{{road}}}\n{{{city}}}\n",
    "default": {
        "address_template": "{{{road}}} {{{house_number}}}\n{{{postcode}}} {{{city}}}\n{{{country}}}\n",
        "fallback_template": "{{#first}} {{{city}}} || {{{county}}} {{/first}}\n{{{country}}}\n",
        "replace": [["^Unnamed Road$", ""]],
    },
    "AA": {
        "address_template": "{{{house_number}}} {{{road}}}\n{{{city}}} {{{state}}}\n{{{country}}}\n",
        "replace": [["road=^Rte ", "Route "]],
        "postformat_replace": [["Springfield IL", "Springfield, Illinois"]],
    },
    "BB": {
        "use_country": "AA",
        "change_country": "$state Republic",
    },
    "CC": {
        "address_template": "{{{road}}}\n{{{postcode}}} {{{city}}}\n{{{country}}}\n",
        "fallback_template": "{{{county}}}\n{{{country}}}\n",
        "change_country": "Cimmeria",
        "add_component": "state=Central",
    },
    "DD": {
        "use_country": "CC",
    },
    False: {"address_template": "{{{city}}}"},
}


@pytest.fixture
def small_components() -> list[dict[str, Any]]:
    """Component definitions of the small rule database (fresh copy)."""
    return copy.deepcopy(SMALL_COMPONENTS)


@pytest.fixture
def small_countries() -> dict[Any, Any]:
    """Country rules of the small rule database (fresh copy)."""
    return copy.deepcopy(SMALL_COUNTRIES)


@pytest.fixture
def small_formatter(
    small_components: list[dict[str, Any]], small_countries: dict[Any, Any]
) -> AddressFormatter:
    """Formatter built from the small rule database."""
    return AddressFormatter.from_config(small_components, small_countries)


@pytest.fixture(scope="session")
def formatter() -> AddressFormatter:
    """Formatter built from the bundled rule database."""
    return AddressFormatter()


@pytest.fixture
def toulouse() -> dict[str, str]:
    """A complete French address."""
    return {
        "house_number": "17",
        "road": "Rue du Médecin-Colonel Calbairac",
        "postcode": "31000",
        "city": "Toulouse",
        "state": "Midi-Pyrénées",
        "country": "France",
        "country_code": "FR",
        "county": "Toulouse",
        "suburb": "Toulouse Ouest",
        "neighbourhood": "Lafourguette",
    }

