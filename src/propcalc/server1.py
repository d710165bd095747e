# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
This file implements authentication routes.
"""

from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Query, Request
from fastapi.responses import ORJSONResponse, RedirectResponse

import propcalc.deployment as d
from propcalc.constraints import valid_code
from propcalc.services.identity import (
    AuthUser,
    IdentityBackend,
    IdentityError,
    get_identity,
)
from propcalc.services.session import (
    clear_session_cookie,
    create_session_cookie,
    require_user,
    set_session_cookie,
)
from propcalc.utils.redirect import safe_url

CALLBACK_ERROR = "/login?error=auth_callback_error"

router = APIRouter(prefix="/auth")


def request_origin(request: Request) -> str:
    if d.ORIGIN:
        return d.ORIGIN

    return f"{request.url.scheme}://{request.url.netloc}"


@router.get("/callback")
async def callback(
    request: Request,
    code: Optional[str] = None,
    next_: Optional[str] = Query(None, alias="next"),
    code_verifier: Optional[str] = Cookie(None, alias=d.VERIFIER_COOKIE),
    identity: IdentityBackend = Depends(get_identity),
) -> RedirectResponse:
    origin = request_origin(request)

    if code and valid_code(code):
        try:
            session = await identity.exchange_code_for_session(code, code_verifier)
        except IdentityError as e:
            d.LOGGER.warning(f"Session exchange failed: {e}")
        else:
            response = RedirectResponse(
                safe_url(next_, origin, d.DEFAULT_REDIRECT), status_code=303
            )
            set_session_cookie(
                response,
                create_session_cookie(session),
                secure=origin.startswith("https://"),
            )
            response.delete_cookie(d.VERIFIER_COOKIE)

            return response
    elif code:
        d.LOGGER.debug(
            f"Rejected oversized session-exchange code ({len(code)} chars)"
        )

    return RedirectResponse(f"{origin}{CALLBACK_ERROR}", status_code=303)


@router.get("/user")
async def user(user: AuthUser = Depends(require_user)) -> ORJSONResponse:
    return ORJSONResponse(user.model_dump())


@router.post("/logout")
async def logout() -> ORJSONResponse:
    response = ORJSONResponse({"status": "signed_out"})
    clear_session_cookie(response)

    return response
