# -*- coding: utf-8 -*-
"""
builder

Resolve declared menu entries into the render-ready menu of one request.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Union

from ..conf import MenuSettings, current_settings
from .contracts import (
    AdminResourceUrlGenerator,
    ApplicationContextProvider,
    AuthorizationChecker,
    LogoutUrlGenerator,
    Translator,
    UrlGenerator,
)
from .dto import MenuItemSpec, ResolvedMenuItem
from .items import MenuItem
from .types import MenuItemType, Permission

logger = logging.getLogger(__name__)

MenuEntry = Union[MenuItem, MenuItemSpec]

SECTION_ANCHOR = "#"


class BuildState(Enum):
    """Lifecycle of the cached menu."""

    DIRTY = "dirty"
    BUILT = "built"


class MenuItemBuilder:
    """Turn declared menu entries into :class:`ResolvedMenuItem` objects.

    One builder serves one request. The resolved tuple is computed on the
    first :meth:`build` call and returned as-is until :meth:`add_item` or
    :meth:`set_items` change the declared entries. The builder holds no
    lock; share it between threads only behind external synchronization.
    """

    def __init__(
        self,
        context_provider: ApplicationContextProvider,
        auth_checker: AuthorizationChecker,
        translator: Translator,
        url_generator: UrlGenerator,
        logout_url_generator: LogoutUrlGenerator,
        crud_url_generator: AdminResourceUrlGenerator,
        *,
        settings: MenuSettings | None = None,
    ) -> None:
        """Bind the collaborators consulted during :meth:`build`."""

        self._context_provider = context_provider
        self._auth_checker = auth_checker
        self._translator = translator
        self._url_generator = url_generator
        self._logout_url_generator = logout_url_generator
        self._crud_url_generator = crud_url_generator
        self._settings = settings
        self._items: List[MenuEntry] = []
        self._built_items: Tuple[ResolvedMenuItem, ...] = ()
        self._state = BuildState.DIRTY

    @property
    def state(self) -> BuildState:
        return self._state

    def add_item(self, item: MenuEntry) -> "MenuItemBuilder":
        """Append ``item`` to the declared entries."""

        self._items.append(item)
        self._reset_built_items()
        return self

    def set_items(self, items: Sequence[MenuEntry]) -> "MenuItemBuilder":
        """Replace the declared entries with ``items``."""

        self._items = items if isinstance(items, list) else list(items)
        self._reset_built_items()
        return self

    def build(self) -> Tuple[ResolvedMenuItem, ...]:
        """Return the resolved menu, computing it on the first call only."""

        if self._state is BuildState.BUILT:
            logger.debug("Serving cached menu with %d entries", len(self._built_items))
            return self._built_items
        built = self._build_menu_items()
        self._built_items = built
        self._state = BuildState.BUILT
        return built

    def _reset_built_items(self) -> None:
        self._built_items = ()
        self._state = BuildState.DIRTY

    def _build_menu_items(self) -> Tuple[ResolvedMenuItem, ...]:
        dashboard = self._context_provider.current_dashboard()
        settings = self._settings or current_settings()
        default_domain = dashboard.translation_domain
        dashboard_route = dashboard.route_name

        built: List[ResolvedMenuItem] = []
        for index, entry in enumerate(self._items):
            spec = self._materialize(entry)
            if not self._auth_checker.is_granted(Permission.VIEW_MENU_ITEM, spec):
                logger.debug("Skipping menu item %r at position %d", spec.label, index)
                continue

            sub_items: List[ResolvedMenuItem] = []
            for sub_index, child in enumerate(spec.sub_items):
                child_spec = self._materialize(child)
                if not self._auth_checker.is_granted(child_spec.permission):
                    logger.debug(
                        "Skipping sub item %r at position %d.%d",
                        child_spec.label,
                        index,
                        sub_index,
                    )
                    continue
                sub_items.append(
                    self._build_menu_item(
                        child_spec, (), index, sub_index, default_domain, dashboard_route, settings
                    )
                )

            built.append(
                self._build_menu_item(
                    spec, sub_items, index, -1, default_domain, dashboard_route, settings
                )
            )

        logger.debug("Built menu with %d of %d entries", len(built), len(self._items))
        return tuple(built)

    def _build_menu_item(
        self,
        spec: MenuItemSpec,
        sub_items: Iterable[ResolvedMenuItem],
        index: int,
        sub_index: int,
        default_domain: str,
        dashboard_route: str,
        settings: MenuSettings,
    ) -> ResolvedMenuItem:
        label = self._translator.translate(spec.label, spec.translation_domain or default_domain)
        url = self._generate_url(spec, dashboard_route, index, sub_index, settings)
        return ResolvedMenuItem.from_spec(
            spec,
            index=index,
            sub_index=sub_index,
            label=label,
            link_url=url,
            sub_items=tuple(sub_items),
        )

    def _generate_url(
        self,
        spec: MenuItemSpec,
        dashboard_route: str,
        index: int,
        sub_index: int,
        settings: MenuSettings,
    ) -> str:
        match spec.type:
            case MenuItemType.URL:
                return spec.link_url or ""
            case MenuItemType.DASHBOARD:
                return self._url_generator.generate(dashboard_route)
            case MenuItemType.ROUTE:
                parameters = self._merge_route_parameters(spec, index, sub_index, settings)
                return self._url_generator.generate(spec.route_name or "", parameters)
            case MenuItemType.CRUD:
                parameters = self._merge_route_parameters(spec, index, sub_index, settings)
                return self._crud_url_generator.generate(parameters)
            case MenuItemType.LOGOUT:
                return self._logout_url_generator.get_logout_path()
            case MenuItemType.EXIT_IMPERSONATION:
                return settings.exit_impersonation_url
            case MenuItemType.SECTION:
                return SECTION_ANCHOR
            case _:
                return ""

    @staticmethod
    def _merge_route_parameters(
        spec: MenuItemSpec,
        index: int,
        sub_index: int,
        settings: MenuSettings,
    ) -> Dict[str, Any]:
        # menu indices mark the selected entry; "query" is cleared so that a
        # search from the current page is not replayed on navigation
        parameters: Dict[str, Any] = {
            settings.menu_index_parameter: index,
            settings.submenu_index_parameter: sub_index,
            "query": None,
        }
        parameters.update(spec.route_parameters)
        return parameters

    @staticmethod
    def _materialize(entry: MenuEntry) -> MenuItemSpec:
        if isinstance(entry, MenuItem):
            return entry.as_dto()
        return entry


__all__ = ["BuildState", "MenuItemBuilder", "SECTION_ANCHOR"]


# The End
