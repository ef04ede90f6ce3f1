# -*- coding: utf-8 -*-
"""
types

Enumerations describing menu item kinds and permission attributes.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, List, cast


class StrChoices(str, Enum):
    """String-based choices: members defined as ('value', 'Label')."""

    label: str  # set on each member

    def __new__(cls, value: str, label: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.label = label  # type: ignore[attr-defined]
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def values(cls) -> List[str]:
        members = cast(Iterable[Any], cls)
        return [m.value for m in members]

    @classmethod
    def get_label(cls, value: Any) -> str | None:
        for m in cast(Iterable[Any], cls):
            if m.value == value:
                return m.label
        return None

    @classmethod
    def coerce(cls, value: Any) -> "StrChoices | str":
        """Return the member matching ``value`` or ``value`` itself when unknown."""
        for m in cast(Iterable[Any], cls):
            if m.value == value:
                return cast(StrChoices, m)
        return value


class MenuItemType(StrChoices):
    """Kinds of menu entries understood by the builder."""

    URL = ("url", "Literal URL")
    ROUTE = ("route", "Named route")
    CRUD = ("crud", "Admin resource")
    DASHBOARD = ("dashboard", "Dashboard")
    LOGOUT = ("logout", "Sign out")
    EXIT_IMPERSONATION = ("exit_impersonation", "Exit impersonation")
    SECTION = ("section", "Section header")
    SUBMENU = ("submenu", "Submenu")


class Permission:
    """Attributes passed to the authorization checker."""

    VIEW_MENU_ITEM = "ADMIN_VIEW_MENU_ITEM"


__all__ = ["MenuItemType", "Permission", "StrChoices"]


# The End
