"""Sanity cleaning of address values before formatting.

Drops data that is known to be bad in crowd-sourced sources (postcode
ranges, oversized postcodes, URLs) so it never reaches a template.
"""

from __future__ import annotations

import logging

from address_formatter.data.constants import (
    MAX_POSTCODE_LENGTH,
    POSTCODE_PAIR_RE,
    POSTCODE_RANGE_RE,
    URL_RE,
)
from address_formatter.models.address import Address
from address_formatter.models.enums import Component

logger = logging.getLogger(__name__)


def clean_postcode(postcode: str) -> str | None:
    """Return the usable part of a postcode, or None if it must be dropped.

    Args:
        postcode: Raw postcode value.

    Returns:
        - None for values longer than 20 characters or ranges like "75001;75002"
        - The first code of a comma-separated pair like "12345,12346"
        - The value unchanged otherwise
    """
    if len(postcode) > MAX_POSTCODE_LENGTH:
        return None
    if POSTCODE_RANGE_RE.search(postcode):
        return None
    pair = POSTCODE_PAIR_RE.match(postcode)
    if pair:
        return pair.group(1)
    return postcode


def sanity_clean_address(address: Address) -> None:
    """Clean known-bad values of ``address`` in place.

    Dropped values are not reported to the caller.
    """
    postcode = address[Component.POSTCODE]
    if postcode:
        cleaned = clean_postcode(postcode)
        if cleaned != postcode:
            logger.debug("Cleaned postcode %r -> %r", postcode, cleaned)
            address[Component.POSTCODE] = cleaned

    for component, value in list(address.items()):
        if URL_RE.search(value):
            logger.debug("Dropped %s containing a URL", component.value)
            address[component] = None
