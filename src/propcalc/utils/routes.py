# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Cross-check ALLOWED_PATHS against an application's route table.

The allow-list is hard-coded. If a section is renamed or removed, redirects to
it would silently land on a 404, so the server checks at startup that every
allow-listed section is still served by some route.
"""

from typing import Any, Iterable

import propcalc.deployment as d
from propcalc.constraints import ensure
from propcalc.utils.redirect import ALLOWED_PATHS

CHECK_MODES = ("off", "warn", "strict")


def static_part(path: str) -> str:
    path = path.split("{", 1)[0]

    if path != "/":
        path = path.rstrip("/")

    return path or "/"


def effective_route(route: Any) -> Any:
    return getattr(route, "starlette_route", None) or route


def route_paths(routes: Iterable[Any], prefix: str = "") -> list[str]:
    """Static paths of a route table, with path parameters cut off.

    Plain strings are taken as paths that are served elsewhere, e.g. by the
    frontend. Included routers and mounts are walked recursively.
    """
    paths = list()

    for route in routes:
        if isinstance(route, str):
            paths.append(static_part(route))
            continue

        if callable(getattr(route, "effective_candidates", None)):
            # Included routers carry their routes with the include prefix applied
            paths.extend(route_paths(route.effective_candidates(), prefix))
            continue

        route = effective_route(route)
        path = getattr(route, "path", None)

        if isinstance(path, str):
            paths.append(static_part(f"{prefix}{path}"))

        children = getattr(route, "routes", None)

        if isinstance(children, list):
            paths.extend(route_paths(children, f"{prefix}{path or ''}".rstrip("/")))

    return paths


def serves(paths: list[str], prefix: str) -> bool:
    return any(path == prefix or path.startswith(f"{prefix}/") for path in paths)


def unrouted_paths(
    routes: Iterable[Any], allowed: tuple[str, ...] = ALLOWED_PATHS
) -> list[str]:
    """Allow-list entries that no route serves, in allow-list order.

    A route serves an entry if its path equals the entry or lies beneath it.
    Mounts count by their prefix and by the routes they contain.
    """
    paths = route_paths(routes)

    return [prefix for prefix in allowed if not serves(paths, prefix)]


def check_routes(
    app: Any, mode: str = "warn", extra: Iterable[str] = ()
) -> list[str]:
    ensure(mode in CHECK_MODES, ValueError, f"Invalid route check mode: {mode}")

    if mode == "off":
        return []

    missing = unrouted_paths([*app.routes, *extra])

    ensure(
        mode != "strict" or not missing,
        RuntimeError,
        f"No route serves allow-listed redirect target(s): {', '.join(missing)}",
    )

    for prefix in missing:
        d.LOGGER.warning(f"No route serves allow-listed redirect target {prefix}")

    return missing
