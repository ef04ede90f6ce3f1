# -*- coding: utf-8 -*-
"""
integration

FastAPI dependencies wiring a per-request menu builder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from dataclasses import dataclass
from typing import Callable, Mapping, Sequence, Union

from fastapi import Request

from .conf import MenuSettings, current_settings
from .core.builder import MenuEntry, MenuItemBuilder
from .core.contracts import AuthorizationChecker, Translator
from .core.security import PermissionGate
from .core.translation import CatalogTranslator
from .routing import (
    CrudUrlGenerator,
    SettingsContextProvider,
    StarletteUrlGenerator,
    StaticLogoutUrlGenerator,
)

ItemSource = Union[Sequence[MenuEntry], Callable[[Request], Sequence[MenuEntry]]]


def default_checker(request: Request) -> AuthorizationChecker:
    """Build a :class:`PermissionGate` from ``request.state.user`` when present."""

    user = getattr(request.state, "user", None)
    return PermissionGate(
        getattr(user, "permissions", ()) or (),
        grant_all=bool(getattr(user, "is_superuser", False)),
    )


@dataclass(frozen=True)
class MenuSelection:
    """Indices of the menu entry the current page was opened from."""

    menu_index: int = -1
    submenu_index: int = -1

    @classmethod
    def from_query(
        cls,
        params: Mapping[str, str],
        settings: MenuSettings | None = None,
    ) -> "MenuSelection":
        active = settings or current_settings()
        return cls(
            menu_index=cls._to_int(params.get(active.menu_index_parameter)),
            submenu_index=cls._to_int(params.get(active.submenu_index_parameter)),
        )

    @classmethod
    def from_request(cls, request: Request) -> "MenuSelection":
        return cls.from_query(request.query_params)

    @staticmethod
    def _to_int(value: str | None) -> int:
        if value is None:
            return -1
        try:
            return int(value)
        except (TypeError, ValueError):
            return -1


class MenuFactory:
    """FastAPI dependency returning a fresh :class:`MenuItemBuilder` per request.

    ``items`` is either the shared declaration list or a callable producing
    it for the request. The builder receives its own copy of the list.
    """

    def __init__(
        self,
        items: ItemSource,
        *,
        checker_factory: Callable[[Request], AuthorizationChecker] | None = None,
        translator: Translator | None = None,
        settings: MenuSettings | None = None,
    ) -> None:
        self._items = items
        self._checker_factory = checker_factory or default_checker
        self._translator = translator or CatalogTranslator()
        self._settings = settings

    def __call__(self, request: Request) -> MenuItemBuilder:
        settings = self._settings or current_settings()
        context_provider = SettingsContextProvider(settings)
        url_generator = StarletteUrlGenerator(
            request.app.router,
            root_path=request.scope.get("root_path", ""),
        )
        builder = MenuItemBuilder(
            context_provider,
            self._checker_factory(request),
            self._translator,
            url_generator,
            StaticLogoutUrlGenerator(settings.logout_path),
            CrudUrlGenerator(url_generator, context_provider),
            settings=settings,
        )
        items = self._items(request) if callable(self._items) else self._items
        builder.set_items(list(items))
        return builder


__all__ = ["MenuFactory", "MenuSelection", "default_checker"]


# The End
