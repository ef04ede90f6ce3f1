# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the admin menu package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from threading import RLock
from typing import Mapping


@dataclass
class MenuSettings:
    """Container for menu configuration derived from environment variables."""

    dashboard_route_name: str = "admin-dashboard"
    translation_domain: str = "messages"
    logout_path: str = "/logout"
    switch_user_parameter: str = "_switch_user"
    exit_impersonation_token: str = "_exit"
    menu_index_parameter: str = "menuIndex"
    submenu_index_parameter: str = "submenuIndex"

    def __post_init__(self) -> None:
        """Normalize values that are used verbatim inside generated URLs."""
        self.logout_path = self._normalize_path(self.logout_path)
        self.switch_user_parameter = self.switch_user_parameter.strip() or "_switch_user"
        self.exit_impersonation_token = self.exit_impersonation_token.strip() or "_exit"

    @property
    def exit_impersonation_url(self) -> str:
        """Return the query string that ends an impersonation session."""
        return f"?{self.switch_user_parameter}={self.exit_impersonation_token}"

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "ADMINMENU_",
    ) -> "MenuSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        return cls(
            dashboard_route_name=data.get("DASHBOARD_ROUTE_NAME") or "admin-dashboard",
            translation_domain=data.get("TRANSLATION_DOMAIN") or "messages",
            logout_path=data.get("LOGOUT_PATH") or "/logout",
            switch_user_parameter=data.get("SWITCH_USER_PARAMETER") or "_switch_user",
            exit_impersonation_token=data.get("EXIT_IMPERSONATION_TOKEN") or "_exit",
            menu_index_parameter=data.get("MENU_INDEX_PARAMETER") or "menuIndex",
            submenu_index_parameter=data.get("SUBMENU_INDEX_PARAMETER") or "submenuIndex",
        )

    @staticmethod
    def _normalize_path(value: str) -> str:
        """Ensure paths always contain a single leading slash."""
        stripped = value.strip().strip("/")
        if not stripped:
            return "/"
        return "/" + stripped


class SettingsManager:
    """Central storage for the active ``MenuSettings`` instance."""

    def __init__(self, initial: MenuSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial

    def configure(self, settings: MenuSettings) -> None:
        """Install a new settings instance."""
        with self._lock:
            self._settings = settings

    def current(self) -> MenuSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = MenuSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Forget the active settings so the next access reloads them."""
        with self._lock:
            self._settings = None


_settings_manager = SettingsManager()


def configure(settings: MenuSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> MenuSettings:
    """Return the active settings instance used by menu components."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Drop configured settings; mostly useful for tests."""
    _settings_manager.reset()


__all__ = [
    "MenuSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
]


# The End
