"""Address templates.

This package contains the compiled Template rule sets, the builder that
produces them from the rule database and the template selector.
"""

from __future__ import annotations

from address_formatter.templates.builder import ConfigurationBuilder, build_configuration
from address_formatter.templates.models import NewComponent, Template, Templates
from address_formatter.templates.selector import (
    MINIMUM_COMPONENTS,
    has_minimum_components,
    select_template,
)

__all__ = [
    # Models
    "NewComponent",
    "Template",
    "Templates",
    # Builder
    "ConfigurationBuilder",
    "build_configuration",
    # Selection
    "MINIMUM_COMPONENTS",
    "has_minimum_components",
    "select_template",
]
