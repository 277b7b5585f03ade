"""Address Formatter Core - rule application and text cleanup utilities.

Usage:
    from address_formatter.core import (
        # Replace rules
        ReplaceRule,
        compile_replace_rules,
        apply_replace_rules,
        # Cleaning
        sanity_clean_address,
        clean_rendered,
        # Factory
        PluginFactory,
    )
"""

from __future__ import annotations

from address_formatter.core.cleaning import clean_postcode, sanity_clean_address
from address_formatter.core.factory import PluginFactory
from address_formatter.core.normalizer import clean_rendered, dedup_lines
from address_formatter.core.replace import (
    ReplaceRule,
    apply_replace_rules,
    apply_text_rules,
    compile_replace_rule,
    compile_replace_rules,
)

__all__ = [
    # Replace rules
    "ReplaceRule",
    "compile_replace_rule",
    "compile_replace_rules",
    "apply_replace_rules",
    "apply_text_rules",
    # Cleaning
    "clean_postcode",
    "sanity_clean_address",
    "clean_rendered",
    "dedup_lines",
    # Factory
    "PluginFactory",
]
