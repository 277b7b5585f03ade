"""Shared Hypothesis strategies for address formatting tests.

This module provides reusable Hypothesis strategies for generating
component values, country codes, raw field pairs and rendered text for
property-based testing.
"""

from __future__ import annotations

import string

import hypothesis.strategies as st

from address_formatter.models import COMPONENT_NAMES

# =============================================================================
# Address Component Constants
# =============================================================================

ROAD_NAMES = [
    "Rue du Taur",
    "Rue de Metz",
    "Allée Jean Jaurès",
    "Boulevard de Strasbourg",
    "Place du Capitole",
    "Avenue de la Gloire",
    "Chemin de la Flambère",
    "Quai de la Daurade",
]

CITY_NAMES = [
    "Toulouse",
    "Blagnac",
    "Colomiers",
    "Tournefeuille",
    "Muret",
    "Balma",
]

COUNTRY_NAMES = ["France", "Deutschland", "United Kingdom", "España"]

# Characters producing every artefact the normalizer deals with
RENDER_ALPHABET = "abcXYZ019 ,\n\t-}"


# =============================================================================
# Component Value Strategies
# =============================================================================


@st.composite
def house_number_strategy(draw: st.DrawFn) -> str:
    """Generate a house number ("17", "17b", "17-19")."""
    num = draw(st.integers(min_value=1, max_value=999))
    variant = draw(st.integers(min_value=0, max_value=2))
    if variant == 0:
        return str(num)
    if variant == 1:
        return f"{num}{draw(st.sampled_from('abc'))}"
    return f"{num}-{num + 2}"


@st.composite
def postcode_strategy(draw: st.DrawFn) -> str:
    """Generate a 5-digit postcode."""
    return draw(st.text(alphabet=string.digits, min_size=5, max_size=5))


@st.composite
def country_code_strategy(draw: st.DrawFn) -> str:
    """Generate a syntactically valid country code in any case."""
    return draw(st.text(alphabet=string.ascii_letters, min_size=2, max_size=2))


@st.composite
def invalid_country_code_strategy(draw: st.DrawFn) -> str:
    """Generate a country code of the wrong length."""
    short = draw(st.booleans())
    if short:
        return draw(st.text(alphabet=string.ascii_letters, max_size=1))
    return draw(st.text(alphabet=string.ascii_letters, min_size=3, max_size=6))


# =============================================================================
# Address Structure Strategies
# =============================================================================


@st.composite
def french_address_dict_strategy(draw: st.DrawFn) -> dict[str, str]:
    """Generate a French address with a road and a city."""
    address = {
        "road": draw(st.sampled_from(ROAD_NAMES)),
        "city": draw(st.sampled_from(CITY_NAMES)),
        "country_code": "FR",
    }
    if draw(st.booleans()):
        address["house_number"] = draw(house_number_strategy())
    if draw(st.booleans()):
        address["postcode"] = draw(postcode_strategy())
    if draw(st.booleans()):
        address["country"] = "France"
    return address


@st.composite
def component_dict_strategy(draw: st.DrawFn) -> dict[str, str]:
    """Generate any subset of components with simple values."""
    names = draw(st.lists(st.sampled_from(COMPONENT_NAMES), unique=True, max_size=8))
    return {
        name: draw(st.text(alphabet=string.ascii_letters + " ", min_size=1, max_size=12))
        for name in names
        if name != "country_code"
    }


@st.composite
def unknown_pairs_strategy(draw: st.DrawFn) -> list[tuple[str, str]]:
    """Generate pairs whose names are neither components nor aliases."""
    values = draw(
        st.lists(
            st.text(alphabet=string.ascii_letters, min_size=1, max_size=10),
            min_size=1,
            max_size=6,
        )
    )
    return [(f"extra_{i}", value) for i, value in enumerate(values)]


# =============================================================================
# Rendered Text Strategies
# =============================================================================


@st.composite
def rendered_text_strategy(draw: st.DrawFn) -> str:
    """Generate text resembling a template rendered with missing components."""
    return draw(st.text(alphabet=RENDER_ALPHABET, max_size=60))
