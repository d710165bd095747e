# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Session cookie service.

After a successful code exchange, the session handed out by the identity
backend is kept in a signed cookie. Signing only protects integrity; the
identity backend stays the authority on whether the access token is valid.
"""

import secrets
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import Cookie, Depends, HTTPException
from fastapi.responses import Response
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

import propcalc.deployment as d
from propcalc.services.identity import (
    AuthSession,
    AuthUser,
    IdentityBackend,
    IdentityError,
    get_identity,
)

SESSION_FIELDS = ("user", "access_token", "refresh_token")


def get_serializer() -> URLSafeTimedSerializer:
    """Get configured cookie serializer."""
    return URLSafeTimedSerializer(d.KEY, salt="propcalc-session")


def create_session_cookie(session: AuthSession) -> str:
    """Sign a session for storage in the session cookie.

    Args:
        session: Session returned by the identity backend

    Returns:
        Signed cookie value
    """
    payload = {
        "user": session.user.id,
        "access_token": session.access_token,
        "refresh_token": session.refresh_token,
        "created_at": datetime.now(timezone.utc).isoformat(),
        "nonce": secrets.token_hex(16),
    }

    return get_serializer().dumps(payload)


def from_cookie(value: Optional[str]) -> Optional[dict[str, Any]]:
    """Parse the session cookie.

    Returns the payload, or None if the cookie is missing, tampered with,
    expired or malformed.
    """
    if not value:
        return None

    try:
        data = get_serializer().loads(value, max_age=d.SESSION_MAX_AGE)
    except (BadSignature, SignatureExpired):
        return None

    if not isinstance(data, dict):
        return None

    for field in SESSION_FIELDS:
        if not isinstance(data.get(field), str) or not data[field]:
            return None

    return data


def set_session_cookie(response: Response, value: str, secure: bool) -> None:
    response.set_cookie(
        d.SESSION_COOKIE,
        value,
        max_age=d.SESSION_MAX_AGE,
        httponly=True,
        secure=secure,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(d.SESSION_COOKIE, httponly=True, samesite="lax")


async def require_user(
    session_cookie: Optional[str] = Cookie(None, alias=d.SESSION_COOKIE),
    identity: IdentityBackend = Depends(get_identity),
) -> AuthUser:
    """FastAPI dependency that resolves the signed-in user.

    Raises:
        HTTPException: 401 if there is no valid session
    """
    data = from_cookie(session_cookie)

    if data is None:
        raise HTTPException(status_code=401, detail="Unauthorized")

    try:
        user = await identity.get_user(data["access_token"])
    except IdentityError as e:
        d.LOGGER.debug(f"Session rejected by identity backend: {e}")
        raise HTTPException(status_code=401, detail="Unauthorized") from e

    if user.id != data["user"]:
        raise HTTPException(status_code=401, detail="Unauthorized")

    return user
