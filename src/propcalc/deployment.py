# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

import logging
import os
import secrets
from typing import Any

from propcalc.constraints import ensure

logging.basicConfig(level=logging.INFO)

DEFAULT_REDIRECT: str = os.getenv("PROPCALC_DEFAULT_REDIRECT", "/dashboard")
FRONTEND_ROUTES: list[str] = [
    r.strip()
    for r in os.getenv("PROPCALC_FRONTEND_ROUTES", "").split(",")
    if r.strip()
]
HOST: str = "127.0.0.1"
IDENTITY_KEY: str = os.getenv("PROPCALC_IDENTITY_KEY", "")
IDENTITY_TIMEOUT: float = float(os.getenv("PROPCALC_IDENTITY_TIMEOUT", "10.0"))
IDENTITY_URL: str = os.getenv("PROPCALC_IDENTITY_URL", "").rstrip("/")
KEY: str = os.getenv("PROPCALC_KEY", "")
LOGGER: Any = logging.getLogger("propcalc")
ORIGIN: str = os.getenv("PROPCALC_ORIGIN", "").rstrip("/")
PORT: int = 8000
ROUTE_CHECK: str = os.getenv("PROPCALC_ROUTE_CHECK", "warn")
SESSION_COOKIE: str = "propcalc_session"
SESSION_MAX_AGE: int = 86400  # 24 hours
UVICORN_KWARGS: dict[str, Any] = dict(
    reload=False,
    log_level="info",
)
VERIFIER_COOKIE: str = "propcalc_code_verifier"

ensure(
    DEFAULT_REDIRECT.startswith("/") and not DEFAULT_REDIRECT.startswith("//"),
    ValueError,
    f"PROPCALC_DEFAULT_REDIRECT must be a local path, got {DEFAULT_REDIRECT!r}",
)
ensure(
    ROUTE_CHECK in ("off", "warn", "strict"),
    ValueError,
    f"Invalid PROPCALC_ROUTE_CHECK environment variable: {ROUTE_CHECK}",
)

if not KEY:
    KEY = secrets.token_urlsafe(32)
    LOGGER.warning("PROPCALC_KEY is not set. Sessions will not survive a restart.")

if not IDENTITY_URL:
    LOGGER.warning("PROPCALC_IDENTITY_URL is not set. Every login will fail.")


async def lifespan_start(*args: Any, **kwargs: Any) -> None:
    pass


async def lifespan_stop(*args: Any, **kwargs: Any) -> None:
    pass
