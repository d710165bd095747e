# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Identity backend client.

Sessions are issued by a hosted, GoTrue-compatible identity service. This
module only exchanges a one-time code for such a session and resolves access
tokens to users.
"""

from typing import Any, Optional, Protocol

import aiohttp
import orjson
from pydantic import BaseModel, ValidationError

import propcalc.deployment as d


class IdentityError(Exception):
    def __init__(self, msg: str, status: Optional[int] = None) -> None:
        super().__init__(msg)
        self.status = status


class AuthUser(BaseModel):
    id: str
    email: Optional[str] = None
    role: Optional[str] = None


class AuthSession(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = 3600
    user: AuthUser


class IdentityBackend(Protocol):
    async def exchange_code_for_session(
        self, code: str, code_verifier: Optional[str] = None
    ) -> AuthSession: ...

    async def get_user(self, access_token: str) -> AuthUser: ...


class GoTrueBackend:
    """Talks to ``{url}/auth/v1`` of a GoTrue-compatible service."""

    def __init__(self, url: str, key: str, timeout: float = 10.0) -> None:
        self.url = url.rstrip("/")
        self.key = key
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    def headers(self, access_token: Optional[str] = None) -> dict[str, str]:
        headers = {
            "apikey": self.key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        if access_token is not None:
            headers["Authorization"] = f"Bearer {access_token}"

        return headers

    async def request(
        self,
        method: str,
        endpoint: str,
        access_token: Optional[str] = None,
        params: Optional[dict[str, str]] = None,
        payload: Optional[dict[str, Any]] = None,
    ) -> Any:
        if not self.url:
            raise IdentityError("No identity backend configured")

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.request(
                    method,
                    f"{self.url}/auth/v1/{endpoint}",
                    params=params,
                    data=orjson.dumps(payload) if payload is not None else None,
                    headers=self.headers(access_token),
                ) as response:
                    body = await response.read()

                    if response.status >= 400:
                        raise IdentityError(
                            f"Identity backend answered {response.status} on {endpoint}",
                            response.status,
                        )
        except aiohttp.ClientError as e:
            raise IdentityError(f"Identity backend unreachable: {e}") from e
        except TimeoutError as e:
            raise IdentityError("Identity backend timed out") from e

        try:
            return orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise IdentityError(f"Invalid JSON from identity backend on {endpoint}") from e

    async def exchange_code_for_session(
        self, code: str, code_verifier: Optional[str] = None
    ) -> AuthSession:
        data = await self.request(
            "POST",
            "token",
            params={"grant_type": "pkce"},
            payload={"auth_code": code, "code_verifier": code_verifier or ""},
        )

        try:
            return AuthSession.model_validate(data)
        except ValidationError as e:
            raise IdentityError("Malformed session from identity backend") from e

    async def get_user(self, access_token: str) -> AuthUser:
        data = await self.request("GET", "user", access_token=access_token)

        try:
            return AuthUser.model_validate(data)
        except ValidationError as e:
            raise IdentityError("Malformed user from identity backend") from e


IDENTITY: Optional[IdentityBackend] = None


def get_identity() -> IdentityBackend:
    """FastAPI dependency returning the process-wide identity backend."""
    global IDENTITY

    if IDENTITY is None:
        IDENTITY = GoTrueBackend(d.IDENTITY_URL, d.IDENTITY_KEY, d.IDENTITY_TIMEOUT)

    return IDENTITY
