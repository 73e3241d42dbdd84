"""Registry of routes that may be called without authentication."""

from __future__ import annotations

import threading
from typing import Iterable, Optional

DEFAULT_PUBLIC_ROUTES = (
    "GET_/swagger/",
    "POST_/api/auth/login",
    "POST_/api/auth/register",
)


class AuthConfig:
    """Thread-safe list of public routes, stored as METHOD_path."""

    def __init__(self, public_routes: Optional[Iterable[str]] = None) -> None:
        self._lock = threading.Lock()
        self.public_routes: list[str] = list(
            DEFAULT_PUBLIC_ROUTES if public_routes is None else public_routes
        )

    def add_public_route(self, method: str, path: str) -> None:
        """Mark a route as public; adding it twice has no effect."""
        route = f"{method.upper()}_{path}"
        with self._lock:
            if route not in self.public_routes:
                self.public_routes.append(route)

    def is_public_route(self, method: str, path: str) -> bool:
        """True when the request needs no authentication.

        Preflight OPTIONS requests are always public when any route is
        registered; otherwise the method must match (or the route must be
        ANY) and the path must equal the route or lie beneath it.
        """
        method = method.upper()
        with self._lock:
            for route in self.public_routes:
                parts = route.split("_", 1)
                if len(parts) != 2:
                    continue
                route_method, route_path = parts
                if method == "OPTIONS":
                    return True
                if route_method in (method, "ANY") and (
                    path == route_path or path.startswith(route_path + "/")
                ):
                    return True
        return False