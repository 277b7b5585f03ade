"""Per-call formatting options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FormatterConfig(BaseModel):
    """Options accepted by ``AddressFormatter.format_with_config``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    country_code: str | None = Field(
        default=None,
        description="Overrides the country code found in the address",
    )
    abbreviate: bool = Field(
        default=False,
        description="Reserved for component abbreviation (e.g. 'Street' -> 'St'); inert",
    )
