"""address-formatter: format postal addresses the way each country writes them.

This package renders decomposed addresses (road, house number, city, ...)
into the postal layout of their country, driven by a rule database of
per-country templates:
- Mustache templates with a ``{{#first}} a || b {{/first}}`` helper
- Country template inheritance (``use_country``)
- Regex clean-up rules before and after rendering
- Alias resolution for non-canonical field names
- Pandas integration and a command line interface

Quick Start:
    >>> from address_formatter import AddressFormatter
    >>> formatter = AddressFormatter()
    >>> print(formatter.format({
    ...     "house_number": "17",
    ...     "road": "Rue du Médecin-Colonel Calbairac",
    ...     "postcode": "31000",
    ...     "city": "Toulouse",
    ...     "country": "France",
    ...     "country_code": "FR",
    ... }), end="")
    17 Rue du Médecin-Colonel Calbairac
    31000 Toulouse
    France

    # Override the country
    >>> formatter.format_with_config(address, {"country_code": "DE"})

    # Build addresses programmatically
    >>> from address_formatter import AddressBuilder
    >>> address = (
    ...     AddressBuilder(formatter.aliases)
    ...     .with_road("Rue du Taur")
    ...     .with_city("Toulouse")
    ...     .with_country_code("FR")
    ...     .build()
    ... )
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from address_formatter.models import (
    COMPONENT_NAMES,
    Address,
    AddressBuilder,
    AddressFormatterError,
    Component,
    ConfigurationError,
    CountryCode,
    FormatterConfig,
    InvalidCountryCodeError,
    TemplateRenderError,
)
from address_formatter.core import clean_rendered
from address_formatter.data import (
    BaseConfigSource,
    ConfigSourceFactory,
    DictConfigSource,
    YAMLConfigSource,
)
from address_formatter.protocols import (
    ConfigSourceProtocol,
    MinimumComponentsPredicate,
    TemplateRendererProtocol,
)
from address_formatter.renderers import (
    BaseTemplateRenderer,
    FirstNonEmptyHelper,
    PystacheRenderer,
    RendererFactory,
)
from address_formatter.templates import (
    ConfigurationBuilder,
    Template,
    Templates,
    build_configuration,
    has_minimum_components,
)
from address_formatter.service import (
    AddressFormatter,
    build_address,
    format_address,
    get_default_formatter,
)
from address_formatter.pandas_ext import format_addresses, register_accessor

__version__ = "0.1.0"
__package_name__ = "address-formatter"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "AddressFormatter",
    "get_default_formatter",
    "format_address",
    "build_address",
    # Models
    "Address",
    "AddressBuilder",
    "Component",
    "COMPONENT_NAMES",
    "CountryCode",
    "FormatterConfig",
    # Errors
    "AddressFormatterError",
    "ConfigurationError",
    "InvalidCountryCodeError",
    "TemplateRenderError",
    # Protocols
    "ConfigSourceProtocol",
    "MinimumComponentsPredicate",
    "TemplateRendererProtocol",
    # Templates
    "ConfigurationBuilder",
    "Template",
    "Templates",
    "build_configuration",
    "has_minimum_components",
    # Renderers
    "BaseTemplateRenderer",
    "FirstNonEmptyHelper",
    "PystacheRenderer",
    "RendererFactory",
    # Config sources
    "BaseConfigSource",
    "ConfigSourceFactory",
    "DictConfigSource",
    "YAMLConfigSource",
    # Text clean-up
    "clean_rendered",
    # Pandas integration
    "format_addresses",
    "register_accessor",
]
