"""Address models package.

This package contains the address data model, the country code value
object, formatting options, the address builder and error classes.
"""

from __future__ import annotations

from address_formatter.models.address import Address
from address_formatter.models.builder import AddressBuilder, build_address
from address_formatter.models.config import FormatterConfig
from address_formatter.models.country import CountryCode
from address_formatter.models.enums import COMPONENT_NAMES, Component
from address_formatter.models.errors import (
    PACKAGE_NAME,
    AddressFormatterError,
    ConfigurationError,
    InvalidCountryCodeError,
    TemplateRenderError,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "AddressFormatterError",
    "ConfigurationError",
    "InvalidCountryCodeError",
    "TemplateRenderError",
    # Enums and constants
    "Component",
    "COMPONENT_NAMES",
    # Models
    "Address",
    "CountryCode",
    "FormatterConfig",
    # Builder
    "AddressBuilder",
    "build_address",
]
