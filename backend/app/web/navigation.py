"""Path to page-view resolution.

The route table is an ordered, immutable sequence of ``Route`` entries built
once at startup and handed to a ``NavigationController``. Matching is exact
(after the base path is stripped and a trailing slash dropped). Anything that
does not match resolves to the fallback view, so every request renders
exactly one page.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from app.web.views import ABOUT, HOME, NOT_FOUND, PRODUCTS, View


@dataclass(frozen=True)
class Route:
    path: str
    view: View


class Resolution(NamedTuple):
    view: View
    path: str
    matched: bool


def build_route_table() -> tuple[Route, ...]:
    return (
        Route("/", HOME),
        Route("/about", ABOUT),
        Route("/products", PRODUCTS),
    )


def _normalize(path: str) -> str:
    return "/" + path.strip("/")


class NavigationController:

    def __init__(
        self,
        routes: Sequence[Route],
        base_path: str = "/",
        fallback: View = NOT_FOUND,
    ) -> None:
        seen: dict[str, Route] = {}
        for route in routes:
            if not route.path.startswith("/"):
                raise ValueError(f"route path must start with '/': {route.path!r}")
            key = _normalize(route.path)
            if key in seen:
                raise ValueError(f"duplicate route path: {route.path!r}")
            seen[key] = route

        self.routes = tuple(routes)
        self.base_path = _normalize(base_path)
        self.fallback = fallback
        self._by_path = seen
        self._by_name = {route.view.name: key for key, route in seen.items()}

    def strip_base(self, path: str) -> str | None:
        """Return ``path`` relative to the base path, or None when outside it."""
        path = _normalize(path)
        if self.base_path == "/":
            return path
        if path == self.base_path:
            return "/"
        if path.startswith(self.base_path + "/"):
            return path[len(self.base_path):]
        return None

    def resolve(self, path: str) -> Resolution:
        relative = self.strip_base(path)
        if relative is not None:
            route = self._by_path.get(relative)
            if route is not None:
                return Resolution(route.view, relative, True)
        return Resolution(self.fallback, relative or _normalize(path), False)

    def url_for(self, view_name: str) -> str:
        try:
            path = self._by_name[view_name]
        except KeyError:
            raise ValueError(f"no route for view {view_name!r}") from None
        if self.base_path == "/":
            return path
        return self.base_path if path == "/" else self.base_path + path

    def nav_links(self) -> list[dict[str, str]]:
        return [
            {"title": route.view.title, "href": self.url_for(route.view.name)}
            for route in self.routes
        ]
