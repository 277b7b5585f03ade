"""Country code value object."""

from __future__ import annotations

from dataclasses import dataclass

from address_formatter.data.constants import COUNTRY_CODE_ALIASES
from address_formatter.models.errors import PACKAGE_NAME, InvalidCountryCodeError


@dataclass(frozen=True)
class CountryCode:
    """A validated, upper-case ISO 3166-1 alpha-2 country code.

    Construction normalizes case and historical aliases, so
    ``CountryCode("uk") == CountryCode("GB")``.

    Raises:
        InvalidCountryCodeError: If the code is not exactly 2 characters long.
    """

    value: str

    def __post_init__(self) -> None:
        code = self.value.strip().upper()
        if len(code) != 2:
            raise InvalidCountryCodeError(
                "invalid_country_code",
                "{value} is not a valid ISO3166-1:alpha2 country code",
                {"package": PACKAGE_NAME, "value": self.value},
            )
        object.__setattr__(self, "value", COUNTRY_CODE_ALIASES.get(code, code))

    @classmethod
    def parse(cls, raw: str) -> CountryCode:
        """Parse a raw string into a CountryCode.

        Args:
            raw: Country code in any case (e.g. "fr", "UK").

        Returns:
            Normalized CountryCode.

        Raises:
            InvalidCountryCodeError: If the code is not 2 characters long.
        """
        return cls(raw)

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        """Check whether a raw value would parse as a country code."""
        return isinstance(raw, str) and len(raw.strip()) == 2

    def __str__(self) -> str:
        return self.value
