# -*- coding: utf-8 -*-
"""
routing

Starlette-backed URL generators and context providers for the menu builder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Set, Tuple
from urllib.parse import urlencode

from starlette.routing import BaseRoute, Host, Mount, NoMatchFound

from .conf import MenuSettings, current_settings
from .core.contracts import (
    AdminResourceUrlGenerator,
    ApplicationContextProvider,
    DashboardContext,
    LogoutUrlGenerator,
    UrlGenerator,
)
from .core.exceptions import RouteNotFound


class StarletteUrlGenerator(UrlGenerator):
    """Build URLs for routes registered on a Starlette or FastAPI router.

    Parameters named after path converters of the route fill the path; the
    remaining ones are appended as a query string. ``None`` values are
    omitted entirely.
    """

    def __init__(self, router: Any, *, root_path: str = "") -> None:
        """Bind the generator to ``router`` mounted under ``root_path``."""

        self._router = router
        self._root_path = root_path.rstrip("/")

    def generate(self, route_name: str, parameters: Mapping[str, Any] | None = None) -> str:
        """Return the URL of ``route_name`` with ``parameters`` applied."""

        path_names = self._find_path_parameters(self._router.routes, route_name)
        if path_names is None:
            raise RouteNotFound(route_name)
        path_params: dict[str, Any] = {}
        query: List[Tuple[str, Any]] = []
        for key, value in (parameters or {}).items():
            if key in path_names:
                path_params[key] = value
            elif value is not None:
                query.append((key, value))
        try:
            path = self._router.url_path_for(route_name, **path_params)
        except NoMatchFound as exc:
            raise RouteNotFound(route_name, f"Cannot build URL for {route_name}: {exc}") from exc
        url = f"{self._root_path}{path}"
        if query:
            url = f"{url}?{urlencode(query, doseq=True)}"
        return url

    @classmethod
    def _find_path_parameters(cls, routes: Iterable[BaseRoute], name: str) -> Set[str] | None:
        """Return path converter names of the route called ``name``."""

        for route in routes:
            if isinstance(route, (Mount, Host)):
                if route.name is None:
                    remaining = name
                elif name.startswith(f"{route.name}:"):
                    remaining = name[len(route.name) + 1 :]
                else:
                    continue
                found = cls._find_path_parameters(route.routes, remaining)
                if found is not None:
                    return found | (set(route.param_convertors) - {"path"})
                continue
            if getattr(route, "name", None) == name:
                return set(getattr(route, "param_convertors", {}))
        return None


class CrudUrlGenerator(AdminResourceUrlGenerator):
    """Point admin resource links at the dashboard route.

    The dashboard dispatches to the right resource page using the
    ``crudController``, ``crudAction``, ``entity`` and ``entityId`` query
    parameters.
    """

    def __init__(
        self,
        url_generator: UrlGenerator,
        context_provider: ApplicationContextProvider,
    ) -> None:
        self._url_generator = url_generator
        self._context_provider = context_provider

    def generate(self, parameters: Mapping[str, Any]) -> str:
        dashboard = self._context_provider.current_dashboard()
        return self._url_generator.generate(dashboard.route_name, parameters)


class StaticLogoutUrlGenerator(LogoutUrlGenerator):
    """Return a logout path fixed at construction time."""

    def __init__(self, path: str | None = None) -> None:
        self._path = path

    def get_logout_path(self) -> str:
        if self._path is not None:
            return self._path
        return current_settings().logout_path


class SettingsContextProvider(ApplicationContextProvider):
    """Derive the dashboard context from :class:`MenuSettings`."""

    def __init__(self, settings: MenuSettings | None = None) -> None:
        self._settings = settings

    def current_dashboard(self) -> DashboardContext:
        settings = self._settings or current_settings()
        return DashboardContext(
            translation_domain=settings.translation_domain,
            route_name=settings.dashboard_route_name,
        )


__all__ = [
    "CrudUrlGenerator",
    "SettingsContextProvider",
    "StarletteUrlGenerator",
    "StaticLogoutUrlGenerator",
]


# The End
