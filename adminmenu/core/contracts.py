# -*- coding: utf-8 -*-
"""
contracts

Interfaces of the services consulted while resolving a menu.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class DashboardContext:
    """Dashboard values shared by every entry of a build."""

    translation_domain: str
    route_name: str


class AuthorizationChecker(ABC):
    """Decide whether the current viewer may see something."""

    @abstractmethod
    def is_granted(self, attribute: Any, subject: Any = None) -> bool:
        """Return ``True`` when ``attribute`` is granted, optionally on ``subject``."""


class Translator(ABC):
    """Map a message key to a display string."""

    @abstractmethod
    def translate(self, key: str, domain: str) -> str:
        """Return the localized message for ``key`` within ``domain``."""


class UrlGenerator(ABC):
    """Generate URLs for named routes."""

    @abstractmethod
    def generate(self, route_name: str, parameters: Mapping[str, Any] | None = None) -> str:
        """Return the URL of ``route_name`` filled with ``parameters``."""


class AdminResourceUrlGenerator(ABC):
    """Generate URLs pointing at admin resource (CRUD) pages."""

    @abstractmethod
    def generate(self, parameters: Mapping[str, Any]) -> str:
        """Return the URL of the resource page described by ``parameters``."""


class LogoutUrlGenerator(ABC):
    """Expose the sign-out location of the current firewall."""

    @abstractmethod
    def get_logout_path(self) -> str:
        """Return the logout path."""


class ApplicationContextProvider(ABC):
    """Expose the dashboard serving the current request."""

    @abstractmethod
    def current_dashboard(self) -> DashboardContext:
        """Return the active :class:`DashboardContext`."""


__all__ = [
    "AdminResourceUrlGenerator",
    "ApplicationContextProvider",
    "AuthorizationChecker",
    "DashboardContext",
    "LogoutUrlGenerator",
    "Translator",
    "UrlGenerator",
]


# The End
