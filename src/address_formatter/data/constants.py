"""Centralized constants for the rule database and formatting pipeline.

This module provides the single source of truth for file names, special
configuration keys and the fixed patterns used while cleaning addresses.
"""

from __future__ import annotations

import re

# Bundled rule database files (inside address_formatter/data/conf)
CONF_PACKAGE = "address_formatter.data"
CONF_DIRNAME = "conf"
COMPONENTS_FILE = "components.yaml"
COUNTRIES_FILE = "worldwide.yaml"

# Environment variable pointing at an alternative rule database directory
CONF_DIR_ENV = "ADDRESS_FORMATTER_CONF_DIR"

# Key of the block holding the default and fallback templates
DEFAULT_KEY = "default"

# Historical country codes that are still found in source data
COUNTRY_CODE_ALIASES: dict[str, str] = {
    "UK": "GB",
}

# Netherlands territories that OSM-style data tags as NL with a state
# (lowercase state name -> (country code, country name))
NL_TERRITORIES: dict[str, tuple[str, str]] = {
    "curaçao": ("CW", "Curaçao"),
    "sint maarten": ("SX", "Sint Maarten"),
    "aruba": ("AW", "Aruba"),
}

# Separator between alternatives of a {{#first}} block
FIRST_SEPARATOR = " || "

# Sanity cleaning of raw component values
MAX_POSTCODE_LENGTH = 20
POSTCODE_RANGE_RE = re.compile(r"\d+;\d+")
POSTCODE_PAIR_RE = re.compile(r"^(\d{5}),\d{5}")
URL_RE = re.compile(r"https?://")

# Reference to another component inside change_country ("$state, France")
COMPONENT_REFERENCE_RE = re.compile(r"\$(\w+)")
