"""Address component enumeration and constants."""

from __future__ import annotations

from enum import Enum


class Component(str, Enum):
    """Enumeration of all address components.

    Values are the canonical snake_case names used by the rule database
    and by template placeholders (``{{{road}}}``).
    """

    ATTENTION = "attention"
    HOUSE_NUMBER = "house_number"
    HOUSE = "house"
    ROAD = "road"
    VILLAGE = "village"
    SUBURB = "suburb"
    CITY = "city"
    COUNTY = "county"
    POSTCODE = "postcode"
    STATE_DISTRICT = "state_district"
    STATE = "state"
    REGION = "region"
    ISLAND = "island"
    NEIGHBOURHOOD = "neighbourhood"
    COUNTRY = "country"
    COUNTRY_CODE = "country_code"
    CONTINENT = "continent"

    @classmethod
    def from_name(cls, name: str) -> Component | None:
        """Look up a component by its canonical name, or None if unknown."""
        try:
            return cls(name)
        except ValueError:
            return None


# All canonical component names, in declaration order
COMPONENT_NAMES: list[str] = [c.value for c in Component]
