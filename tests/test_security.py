# -*- coding: utf-8 -*-
"""
tests.test_security

Default permission gate used to filter menu entries.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging

from adminmenu.core.dto import MenuItemSpec
from adminmenu.core.security import PermissionGate
from adminmenu.core.translation import CatalogTranslator
from adminmenu.core.types import MenuItemType, Permission
from tests.conftest import MenuHarness


def _spec(permission: str | None) -> MenuItemSpec:
    return MenuItemSpec(type=MenuItemType.SECTION, label="Item", permission=permission)


def test_absent_permission_is_visible() -> None:
    gate = PermissionGate()
    assert gate.is_granted(None)
    assert gate.is_granted(Permission.VIEW_MENU_ITEM, _spec(None))


def test_menu_item_vote_uses_item_permission() -> None:
    gate = PermissionGate({"ROLE_EDITOR"})
    assert gate.is_granted(Permission.VIEW_MENU_ITEM, _spec("ROLE_EDITOR"))
    assert not gate.is_granted(Permission.VIEW_MENU_ITEM, _spec("ROLE_ADMIN"))


def test_plain_token_checks() -> None:
    gate = PermissionGate(["ROLE_EDITOR"])
    assert gate.is_granted("ROLE_EDITOR")
    assert not gate.is_granted("ROLE_ADMIN")


def test_predicate_and_grant_all() -> None:
    gate = PermissionGate(lambda token: token.startswith("blog."))
    assert gate.is_granted("blog.view")
    assert not gate.is_granted("shop.view")
    assert PermissionGate(grant_all=True).is_granted("anything")
    assert PermissionGate(grant_all=True).is_granted(Permission.VIEW_MENU_ITEM, _spec("ROLE_X"))


def test_denial_is_logged(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="adminmenu.core.security")
    PermissionGate().is_granted("ROLE_ADMIN")
    assert "Permission denied" in caplog.text


def test_gate_drives_builder_filtering() -> None:
    harness = MenuHarness(checker=PermissionGate({"ROLE_BLOG"}))
    harness.builder.set_items(
        [
            _spec("ROLE_SHOP"),
            MenuItemSpec(
                type=MenuItemType.SUBMENU,
                label="Blog",
                permission="ROLE_BLOG",
                sub_items=(_spec("ROLE_SHOP"), _spec(None), _spec("ROLE_BLOG")),
            ),
        ]
    )

    built = harness.builder.build()

    assert [item.index for item in built] == [1]
    assert [child.sub_index for child in built[0].sub_items] == [1, 2]


def test_catalog_translator_falls_back_to_key() -> None:
    translator = CatalogTranslator({"admin": {"menu.users": "Users"}})
    translator.add_messages("admin", {"menu.groups": "Groups"})

    assert translator.translate("menu.users", "admin") == "Users"
    assert translator.translate("menu.groups", "admin") == "Groups"
    assert translator.translate("menu.users", "other") == "menu.users"
    assert translator.translate("missing", "admin") == "missing"


# The End
