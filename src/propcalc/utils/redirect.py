# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Safe redirect utilities to prevent open redirect vulnerabilities.

A post-login destination arrives as an untrusted ``next`` parameter. It is only
honored if it is a same-origin path below one of the application's known
sections (``ALLOWED_PATHS``). Anything else, including anything that merely
looks odd, resolves to a trusted fallback. Nothing in this module raises.
"""

import re
from typing import Any, Optional
from urllib.parse import unquote

DEFAULT_FALLBACK = "/dashboard"

ALLOWED_PATHS: tuple[str, ...] = (
    "/dashboard",
    "/calculator",
    "/calculations",
    "/settings",
    "/reset-password",
)

BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def remove_dot_segments(path: str) -> str:
    """Resolve ``.`` and ``..`` segments of an absolute path.

    ``..`` never climbs above the root, and a trailing dot-segment leaves a
    trailing slash behind, as browsers do.
    """
    resolved: list[str] = []
    segments = path.split("/")[1:]

    for segment in segments:
        if segment == "..":
            if resolved:
                resolved.pop()
        elif segment != ".":
            resolved.append(segment)

    if segments and segments[-1] in (".", ".."):
        resolved.append("")

    return "/" + "/".join(resolved)


def normalize_path(path: str) -> Optional[str]:
    """Percent-decode a path and resolve its dot-segments.

    Returns None if the path contains a malformed escape sequence or does not
    decode to valid UTF-8.
    """
    if BAD_ESCAPE.search(path):
        return None

    try:
        decoded = unquote(path, errors="strict")
    except UnicodeDecodeError:
        return None

    if not decoded.startswith("/"):
        return None

    return remove_dot_segments(decoded)


def is_allowed_path(path: str, allowed: tuple[str, ...] = ALLOWED_PATHS) -> bool:
    """Is path the root, an allowed section, or somewhere below one?"""
    return path == "/" or any(
        path == prefix or path.startswith(f"{prefix}/") for prefix in allowed
    )


def unsafe_shape(path: str) -> bool:
    return (
        not path.startswith("/")
        or path.startswith("//")
        or "@" in path
        or "\\" in path
        or CONTROL_CHARS.search(path) is not None
    )


def safe_path(candidate: Any, fallback: str = DEFAULT_FALLBACK) -> str:
    """Validate a redirect path, returning fallback if it is not safe.

    The candidate must be a relative path (a single leading ``/``, no ``@``, no
    backslash) whose path portion, both as given and after percent-decoding
    and dot-segment resolution, is the root or lies within ``ALLOWED_PATHS``.
    The query string is kept but not inspected. A safe candidate is returned
    unmodified.
    """
    if not candidate or not isinstance(candidate, str):
        return fallback

    if unsafe_shape(candidate):
        return fallback

    path = candidate.split("?", 1)[0]

    if not is_allowed_path(path):
        return fallback

    # Catches /dashboard/../admin and encoded variants of the above
    normalized = normalize_path(path)

    if normalized is None or unsafe_shape(normalized):
        return fallback

    if not is_allowed_path(normalized):
        return fallback

    return candidate


def safe_url(
    candidate: Any,
    origin: str,
    fallback: str = DEFAULT_FALLBACK,
) -> str:
    """Validate a redirect path and make it absolute.

    ``origin`` must come from the server, never from the client: it is
    prepended as is.
    """
    return f"{origin}{safe_path(candidate, fallback)}"
