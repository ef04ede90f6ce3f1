# -*- coding: utf-8 -*-
"""conftest

Shared fakes and fixtures for the menu test-suite.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Tuple

import pytest

from adminmenu.conf import MenuSettings, configure, reset_settings
from adminmenu.core.builder import MenuItemBuilder
from adminmenu.core.contracts import (
    AdminResourceUrlGenerator,
    ApplicationContextProvider,
    AuthorizationChecker,
    DashboardContext,
    LogoutUrlGenerator,
    Translator,
    UrlGenerator,
)


class FakeAuthChecker(AuthorizationChecker):
    """Deny top-level items by label and sub items by permission token."""

    def __init__(self) -> None:
        self.denied_labels: set[str] = set()
        self.denied_tokens: set[str] = set()
        self.calls: List[Tuple[Any, Any]] = []

    def is_granted(self, attribute: Any, subject: Any = None) -> bool:
        self.calls.append((attribute, subject))
        if subject is not None:
            return subject.label not in self.denied_labels
        return attribute not in self.denied_tokens


class FakeTranslator(Translator):
    """Echo ``domain:key`` so tests can see which domain was used."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []
        self.error: Exception | None = None

    def translate(self, key: str, domain: str) -> str:
        self.calls.append((key, domain))
        if self.error is not None:
            raise self.error
        return f"{domain}:{key}"


class FakeUrlGenerator(UrlGenerator):
    """Record generated routes and return ``/route/<name>``."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Dict[str, Any] | None]] = []

    def generate(self, route_name: str, parameters: Mapping[str, Any] | None = None) -> str:
        self.calls.append((route_name, None if parameters is None else dict(parameters)))
        return f"/route/{route_name}"


class FakeCrudUrlGenerator(AdminResourceUrlGenerator):
    """Record CRUD parameters and return ``/crud``."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []

    def generate(self, parameters: Mapping[str, Any]) -> str:
        self.calls.append(dict(parameters))
        return "/crud"


class FakeLogoutUrlGenerator(LogoutUrlGenerator):
    def __init__(self) -> None:
        self.calls = 0

    def get_logout_path(self) -> str:
        self.calls += 1
        return "/sign-out"


class FakeContextProvider(ApplicationContextProvider):
    def __init__(self) -> None:
        self.calls = 0
        self.dashboard = DashboardContext(translation_domain="admin", route_name="dashboard")

    def current_dashboard(self) -> DashboardContext:
        self.calls += 1
        return self.dashboard


class MenuHarness:
    """Wire a builder to counting fakes."""

    def __init__(
        self,
        settings: MenuSettings | None = None,
        checker: AuthorizationChecker | None = None,
    ) -> None:
        self.context = FakeContextProvider()
        self.checker = checker if checker is not None else FakeAuthChecker()
        self.translator = FakeTranslator()
        self.urls = FakeUrlGenerator()
        self.crud_urls = FakeCrudUrlGenerator()
        self.logout = FakeLogoutUrlGenerator()
        self.builder = MenuItemBuilder(
            self.context,
            self.checker,
            self.translator,
            self.urls,
            self.logout,
            self.crud_urls,
            settings=settings or MenuSettings(),
        )

    def collaborator_calls(self) -> int:
        return (
            len(getattr(self.checker, "calls", ()))
            + len(self.translator.calls)
            + len(self.urls.calls)
            + len(self.crud_urls.calls)
            + self.logout.calls
            + self.context.calls
        )


@pytest.fixture(autouse=True)
def default_settings() -> Iterator[MenuSettings]:
    """Install pristine settings for every test."""

    settings = MenuSettings()
    configure(settings)
    yield settings
    reset_settings()


@pytest.fixture
def harness() -> MenuHarness:
    return MenuHarness()


# The End
