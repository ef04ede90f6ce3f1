# -*- coding: utf-8 -*-
"""
dto

Immutable data carriers for declared and resolved menu entries.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from .types import MenuItemType


def _freeze(parameters: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only copy of ``parameters``."""

    return MappingProxyType(dict(parameters))


@dataclass(frozen=True)
class MenuItemSpec:
    """Declarative description of one menu entry before resolution.

    ``type`` is normally a :class:`MenuItemType` member but any string is
    accepted; unknown kinds resolve to an empty URL instead of failing.
    ``sub_items`` is only meaningful for submenus and is never nested
    further.
    """

    type: str
    label: str
    icon: str | None = None
    css_class: str = ""
    permission: str | None = None
    link_url: str | None = None
    link_rel: str = ""
    link_target: str = "_self"
    translation_domain: str | None = None
    route_name: str | None = None
    route_parameters: Mapping[str, Any] = field(default_factory=dict, hash=False)
    sub_items: Tuple["MenuItemSpec", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "route_parameters", _freeze(self.route_parameters))

    def is_submenu(self) -> bool:
        return self.type == MenuItemType.SUBMENU


@dataclass(frozen=True)
class ResolvedMenuItem:
    """Render-ready menu entry produced by :class:`MenuItemBuilder`.

    ``index`` is the position of the owning top-level entry in the declared
    list, ``sub_index`` the position inside its submenu or ``-1`` for
    top-level entries. Both count entries hidden from the viewer.
    """

    type: str
    label: str
    index: int
    sub_index: int
    link_url: str
    icon: str | None = None
    css_class: str = ""
    permission: str | None = None
    link_rel: str = ""
    link_target: str = "_self"
    translation_domain: str | None = None
    route_name: str | None = None
    route_parameters: Mapping[str, Any] = field(default_factory=dict, hash=False)
    sub_items: Tuple["ResolvedMenuItem", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "route_parameters", _freeze(self.route_parameters))

    @classmethod
    def from_spec(cls, spec: MenuItemSpec, **overrides: Any) -> "ResolvedMenuItem":
        """Copy ``spec`` field by field, replacing the values in ``overrides``."""

        own_fields = {item.name for item in fields(cls)}
        values: Dict[str, Any] = {
            item.name: getattr(spec, item.name)
            for item in fields(spec)
            if item.name in own_fields and item.name != "sub_items"
        }
        values.update(overrides)
        values["sub_items"] = tuple(values.get("sub_items", ()))
        return cls(**values)

    def is_section(self) -> bool:
        return self.type == MenuItemType.SECTION

    def is_submenu(self) -> bool:
        return self.type == MenuItemType.SUBMENU

    def has_sub_items(self) -> bool:
        return bool(self.sub_items)

    def is_selected(self, menu_index: int, submenu_index: int = -1) -> bool:
        """Return ``True`` when this entry is the one addressed by the indices."""

        return self.index == menu_index and self.sub_index == submenu_index

    def is_expanded(self, menu_index: int) -> bool:
        """Return ``True`` when a submenu should render open for ``menu_index``."""

        return self.has_sub_items() and self.sub_index == -1 and self.index == menu_index

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {item.name: getattr(self, item.name) for item in fields(self)}
        payload["type"] = str(self.type)
        payload["route_parameters"] = dict(self.route_parameters)
        payload["sub_items"] = [child.as_dict() for child in self.sub_items]
        return payload


__all__ = ["MenuItemSpec", "ResolvedMenuItem"]


# The End
