# -*- coding: utf-8 -*-
"""
__init__

Core menu resolution utilities.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .builder import BuildState, MenuItemBuilder
from .contracts import DashboardContext
from .dto import MenuItemSpec, ResolvedMenuItem
from .exceptions import MenuConfigurationError, MenuError, RouteNotFound
from .items import MenuItem
from .types import MenuItemType, Permission

__all__ = [
    "BuildState",
    "DashboardContext",
    "MenuConfigurationError",
    "MenuError",
    "MenuItem",
    "MenuItemBuilder",
    "MenuItemSpec",
    "MenuItemType",
    "Permission",
    "ResolvedMenuItem",
    "RouteNotFound",
]

# The End
