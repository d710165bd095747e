# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Check that a pasted URL points at a single Zillow or Redfin listing."""

import re
from typing import Any, Literal, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel

INVALID_FORMAT = "Invalid URL format. Please paste a full listing URL."
NOT_HTTPS = "URL must use HTTPS."
NOT_REDFIN_LISTING = (
    "This doesn't look like a Redfin property page. "
    "Please paste a URL from a specific listing."
)
NOT_ZILLOW_LISTING = (
    "This doesn't look like a Zillow property page. Please paste a URL from a "
    "specific listing (e.g., zillow.com/homedetails/...)."
)
UNSUPPORTED_SITE = (
    "Only Zillow and Redfin URLs are supported. "
    "Please paste a listing URL from one of these sites."
)

REDFIN_HOSTS = frozenset({"redfin.com", "www.redfin.com"})
REDFIN_STATE_PATH = re.compile(r"/[A-Z]{2}/.+/.+/home/", re.IGNORECASE)
ZILLOW_HOSTS = frozenset({"zillow.com", "www.zillow.com"})


class ListingUrl(BaseModel):
    valid: bool
    source: Optional[Literal["zillow", "redfin"]] = None
    error: Optional[str] = None


def invalid(error: str) -> ListingUrl:
    return ListingUrl(valid=False, error=error)


def validate_listing_url(raw: Any) -> ListingUrl:
    if not isinstance(raw, str):
        return invalid(INVALID_FORMAT)

    try:
        parts = urlsplit(raw.strip())
        hostname = parts.hostname
        parts.port  # raises on a malformed port
    except ValueError:
        return invalid(INVALID_FORMAT)

    if not parts.scheme or not hostname:
        return invalid(INVALID_FORMAT)

    if parts.scheme.lower() != "https":
        return invalid(NOT_HTTPS)

    if hostname in ZILLOW_HOSTS:
        if "/homedetails/" not in parts.path:
            return invalid(NOT_ZILLOW_LISTING)

        return ListingUrl(valid=True, source="zillow")

    if hostname in REDFIN_HOSTS:
        if "/home/" not in parts.path and not REDFIN_STATE_PATH.search(parts.path):
            return invalid(NOT_REDFIN_LISTING)

        return ListingUrl(valid=True, source="redfin")

    return invalid(UNSUPPORTED_SITE)
