# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for the menu core.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class MenuError(Exception):
    """Base class for menu-specific exceptions."""


class MenuConfigurationError(MenuError):
    """Raised when a menu item is configured in an unsupported way."""


class RouteNotFound(MenuError):
    """Raised when a URL is requested for a route that is not registered."""

    def __init__(self, route_name: str, detail: str | None = None) -> None:
        super().__init__(detail or f"Unknown route: {route_name}")
        self.route_name = route_name


__all__ = ["MenuConfigurationError", "MenuError", "RouteNotFound"]


# The End
