# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

from contextlib import asynccontextmanager
from typing import AsyncIterator, Never

from fastapi import FastAPI

import propcalc as p
import propcalc.deployment as d
from propcalc.server1 import router as router1
from propcalc.server2 import router as router2
from propcalc.utils.redirect import ALLOWED_PATHS
from propcalc.utils.routes import check_routes


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[Never]:
    check_routes(app, d.ROUTE_CHECK, d.FRONTEND_ROUTES)

    d.LOGGER.info(f"This is propcalc {p.__version__}")
    d.LOGGER.info(f"Server is running at http://{d.HOST}:{d.PORT}/")
    d.LOGGER.info(f"Post-login redirects allowed to {', '.join(ALLOWED_PATHS)}")

    await d.lifespan_start(app)

    ...
    yield  # type: ignore[misc]
    ...

    await d.lifespan_stop(app)


propcalc_server = FastAPI(
    lifespan=lifespan,
    redirect_slashes=False,
)

propcalc_server.include_router(router1)
propcalc_server.include_router(router2)
