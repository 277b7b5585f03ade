"""Address model.

This module contains the Address Pydantic model: one optional string
slot per Component, so every component is always addressable.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

from address_formatter.models.enums import Component


class Address(BaseModel):
    """A decomposed postal address.

    Each Component has exactly one slot; an absent value is ``None``, never
    a missing key. Values can be read and written by attribute
    (``address.road``) or by Component (``address[Component.ROAD]``).

    Example:
        >>> address = Address(house_number="17", road="Rue du Taur", city="Toulouse")
        >>> address[Component.CITY]
        'Toulouse'
    """

    model_config = ConfigDict(
        extra="ignore",  # Unknown keys go through build_address, not the model
    )

    attention: str | None = Field(
        default=None,
        description="Catch-all for data that matches no other component",
    )
    house_number: str | None = Field(default=None, description="House or street number")
    house: str | None = Field(default=None, description="House or building name")
    road: str | None = Field(default=None, description="Street/road name")
    village: str | None = Field(default=None, description="Village or hamlet")
    suburb: str | None = Field(default=None, description="Suburb or city district")
    city: str | None = Field(default=None, description="City or town")
    county: str | None = Field(default=None, description="County or department")
    postcode: str | None = Field(default=None, description="Postal code")
    state_district: str | None = Field(
        default=None, description="Administrative level between state and county"
    )
    state: str | None = Field(default=None, description="State, province or region")
    region: str | None = Field(default=None, description="Region above state level")
    island: str | None = Field(default=None, description="Island or archipelago")
    neighbourhood: str | None = Field(default=None, description="Neighbourhood or quarter")
    country: str | None = Field(default=None, description="Country name")
    country_code: str | None = Field(
        default=None, description="ISO 3166-1 alpha-2 country code as given by the source"
    )
    continent: str | None = Field(default=None, description="Continent name")

    def __getitem__(self, component: Component) -> str | None:
        return getattr(self, component.value)

    def __setitem__(self, component: Component, value: str | None) -> None:
        setattr(self, component.value, value)

    def get(self, component: Component) -> str | None:
        """Get a component value, treating empty strings as absent."""
        return self[component] or None

    def items(self) -> Iterator[tuple[Component, str]]:
        """Iterate over the components that hold a non-empty value."""
        for component in Component:
            value = self[component]
            if value:
                yield component, value

    @property
    def is_empty(self) -> bool:
        """True if no component holds a value."""
        return next(self.items(), None) is None

    def to_dict(self) -> dict[str, str | None]:
        """Convert address to a dictionary with every component name as key."""
        return self.model_dump()

    def to_context(self) -> dict[str, str]:
        """Template context: canonical name -> value, for set components only."""
        return {component.value: value for component, value in self.items()}
