"""
The fixed table of API routes.

``ROUTE_TABLE`` lists every ``(method, path)`` pair the API serves,
relative to ``settings.API_PREFIX``.  ``news_api.main`` calls
:func:`check_route_table` once the routers are mounted; a route missing
from either side stops the application from starting.  Any other verb
on one of these paths is answered with 405 by the error handlers.
"""
from __future__ import annotations

from fastapi import FastAPI

from news_api.config import settings

ROUTE_TABLE: tuple[tuple[str, str], ...] = (
    ("GET", ""),
    ("GET", "/topics"),
    ("GET", "/articles"),
    ("GET", "/articles/{article_id}"),
    ("PATCH", "/articles/{article_id}"),
    ("GET", "/articles/{article_id}/comments"),
    ("POST", "/articles/{article_id}/comments"),
    ("PATCH", "/comments/{comment_id}"),
    ("DELETE", "/comments/{comment_id}"),
    ("GET", "/users"),
    ("GET", "/users/{username}"),
)

# Served outside the prefix and not part of the resource surface.
SYSTEM_PATHS = frozenset({"/health"})

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"})


def _qualify(prefix: str, path: str) -> str:
    return f"{prefix}{path}" or "/"


def expected_routes(prefix: str | None = None) -> set[tuple[str, str]]:
    prefix = settings.API_PREFIX if prefix is None else prefix
    return {(method, _qualify(prefix, path)) for method, path in ROUTE_TABLE}


def mounted_routes(app: FastAPI) -> set[tuple[str, str]]:
    """
    Every ``(method, path)`` pair the application actually serves.

    Read from the generated OpenAPI document, which lists the routes of
    included routers with their prefixes applied however the framework
    stores them internally.
    """
    routes = set()
    for path, operations in app.openapi().get("paths", {}).items():
        if path in SYSTEM_PATHS:
            continue
        for method in operations:
            if method.upper() in HTTP_METHODS:
                routes.add((method.upper(), path))
    return routes


def check_route_table(app: FastAPI, prefix: str | None = None) -> None:
    """Raise ``RuntimeError`` unless *app* serves exactly ``ROUTE_TABLE``."""
    expected = expected_routes(prefix)
    mounted = mounted_routes(app)
    missing = expected - mounted
    unexpected = mounted - expected
    if missing or unexpected:
        raise RuntimeError(
            f"Route table mismatch: missing={sorted(missing)} unexpected={sorted(unexpected)}"
        )


def endpoints_index(prefix: str | None = None) -> dict[str, list[str]]:
    """Map each path to the methods it accepts, for the API index."""
    index: dict[str, list[str]] = {}
    for method, path in sorted(expected_routes(prefix), key=lambda r: (r[1], r[0])):
        index.setdefault(path, []).append(method)
    return index
