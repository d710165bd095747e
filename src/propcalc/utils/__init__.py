# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Utility functions shared across the propcalc package."""

from propcalc.utils.listing import validate_listing_url
from propcalc.utils.redirect import ALLOWED_PATHS, safe_path, safe_url

__all__ = ["ALLOWED_PATHS", "safe_path", "safe_url", "validate_listing_url"]
