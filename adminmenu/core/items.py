# -*- coding: utf-8 -*-
"""
items

Fluent configuration objects used to declare admin menu entries.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .dto import MenuItemSpec
from .exceptions import MenuConfigurationError
from .types import MenuItemType


class MenuItem:
    """Mutable declaration of a menu entry, materialized via :meth:`as_dto`.

    Instances are created through the ``link_to_*``, :meth:`section` and
    :meth:`sub_menu` factories and refined with chained setters::

        MenuItem.link_to_crud("Users", "bi bi-people", "auth.User").set_permission("ROLE_ADMIN")
    """

    def __init__(self, item_type: MenuItemType | str, label: str, icon: str | None = None) -> None:
        """Store the entry kind together with its untranslated label."""

        self._type = MenuItemType.coerce(item_type)
        self._label = label
        self._icon = icon
        self._css_class = ""
        self._permission: str | None = None
        self._link_url: str | None = None
        self._link_rel = ""
        self._link_target = "_self"
        self._translation_domain: str | None = None
        self._route_name: str | None = None
        self._route_parameters: Dict[str, Any] = {}
        self._sub_items: List[MenuItem] = []

    # Factories --------------------------------------------------------
    @classmethod
    def link_to_url(cls, label: str, icon: str | None, url: str) -> "MenuItem":
        item = cls(MenuItemType.URL, label, icon)
        item._link_url = url
        return item

    @classmethod
    def link_to_route(
        cls,
        label: str,
        icon: str | None,
        route_name: str,
        route_parameters: Dict[str, Any] | None = None,
    ) -> "MenuItem":
        item = cls(MenuItemType.ROUTE, label, icon)
        item._route_name = route_name
        item._route_parameters = dict(route_parameters or {})
        return item

    @classmethod
    def link_to_crud(cls, label: str, icon: str | None, entity: str) -> "MenuItem":
        """Link to the listing of the managed ``entity``."""

        item = cls(MenuItemType.CRUD, label, icon)
        item._route_parameters = {"crudAction": "index", "entity": entity}
        return item

    @classmethod
    def link_to_dashboard(cls, label: str, icon: str | None = None) -> "MenuItem":
        return cls(MenuItemType.DASHBOARD, label, icon)

    @classmethod
    def link_to_logout(cls, label: str, icon: str | None = None) -> "MenuItem":
        return cls(MenuItemType.LOGOUT, label, icon)

    @classmethod
    def link_to_exit_impersonation(cls, label: str, icon: str | None = None) -> "MenuItem":
        return cls(MenuItemType.EXIT_IMPERSONATION, label, icon)

    @classmethod
    def section(cls, label: str = "", icon: str | None = None) -> "MenuItem":
        return cls(MenuItemType.SECTION, label, icon)

    @classmethod
    def sub_menu(
        cls,
        label: str,
        icon: str | None = None,
        sub_items: Iterable["MenuItem"] = (),
    ) -> "MenuItem":
        item = cls(MenuItemType.SUBMENU, label, icon)
        return item.set_sub_items(sub_items)

    # Setters ----------------------------------------------------------
    def set_permission(self, permission: str | None) -> "MenuItem":
        self._permission = permission
        return self

    def set_translation_domain(self, domain: str | None) -> "MenuItem":
        self._translation_domain = domain
        return self

    def set_css_class(self, css_class: str) -> "MenuItem":
        self._css_class = css_class
        return self

    def set_icon(self, icon: str | None) -> "MenuItem":
        self._icon = icon
        return self

    def set_link_target(self, target: str) -> "MenuItem":
        self._link_target = target
        return self

    def set_link_rel(self, rel: str) -> "MenuItem":
        self._link_rel = rel
        return self

    def set_sub_items(self, sub_items: Iterable["MenuItem"]) -> "MenuItem":
        """Attach ``sub_items`` to this submenu; nesting stops at one level."""

        if self._type != MenuItemType.SUBMENU:
            raise MenuConfigurationError(
                f"Only submenus accept sub items, got {self._type!s} for {self._label!r}"
            )
        items = list(sub_items)
        for child in items:
            if child._type == MenuItemType.SUBMENU:
                raise MenuConfigurationError(
                    f"Submenu {self._label!r} cannot contain submenu {child._label!r}"
                )
        self._sub_items = items
        return self

    # CRUD helpers -----------------------------------------------------
    def set_controller(self, controller: str) -> "MenuItem":
        return self._set_crud_parameter("crudController", controller)

    def set_action(self, action: str) -> "MenuItem":
        return self._set_crud_parameter("crudAction", action)

    def set_entity_id(self, entity_id: Any) -> "MenuItem":
        return self._set_crud_parameter("entityId", entity_id)

    def set_query_parameter(self, name: str, value: Any) -> "MenuItem":
        """Add an extra query parameter to route and CRUD links."""

        if self._type not in (MenuItemType.ROUTE, MenuItemType.CRUD):
            raise MenuConfigurationError(
                f"Query parameters only apply to route and crud items, not {self._type!s}"
            )
        self._route_parameters[name] = value
        return self

    def _set_crud_parameter(self, name: str, value: Any) -> "MenuItem":
        if self._type != MenuItemType.CRUD:
            raise MenuConfigurationError(f"{name} only applies to crud items")
        self._route_parameters[name] = value
        return self

    # Materialization --------------------------------------------------
    def as_dto(self) -> MenuItemSpec:
        """Return an immutable snapshot of the current configuration."""

        return MenuItemSpec(
            type=self._type,
            label=self._label,
            icon=self._icon,
            css_class=self._css_class,
            permission=self._permission,
            link_url=self._link_url,
            link_rel=self._link_rel,
            link_target=self._link_target,
            translation_domain=self._translation_domain,
            route_name=self._route_name,
            route_parameters=dict(self._route_parameters),
            sub_items=tuple(child.as_dto() for child in self._sub_items),
        )


__all__ = ["MenuItem"]


# The End
