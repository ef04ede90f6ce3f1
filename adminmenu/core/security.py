# -*- coding: utf-8 -*-
"""
security

Default authorization checker deciding menu item visibility.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from .contracts import AuthorizationChecker
from .dto import MenuItemSpec
from .types import Permission

logger = logging.getLogger(__name__)


class PermissionGate(AuthorizationChecker):
    """Grant permission tokens held by the current viewer.

    ``granted`` is either an iterable of tokens or a predicate receiving a
    token. ``grant_all`` short-circuits every check, as for superusers.
    """

    def __init__(
        self,
        granted: Iterable[str] | Callable[[str], bool] = (),
        *,
        grant_all: bool = False,
    ) -> None:
        """Store the viewer's grants."""

        if callable(granted):
            self._predicate: Callable[[str], bool] = granted
        else:
            tokens = frozenset(granted)
            self._predicate = tokens.__contains__
        self._grant_all = grant_all

    def is_granted(self, attribute: Any, subject: Any = None) -> bool:
        """Return ``True`` when ``attribute`` is granted on ``subject``."""

        if attribute is None:
            return True
        if attribute == Permission.VIEW_MENU_ITEM and isinstance(subject, MenuItemSpec):
            return self._vote_on_menu_item(subject)
        if self._grant_all or self._predicate(str(attribute)):
            return True
        logger.debug("Permission denied", extra={"attribute": attribute})
        return False

    def _vote_on_menu_item(self, item: MenuItemSpec) -> bool:
        if item.permission is None:
            return True
        return self.is_granted(item.permission)


__all__ = ["PermissionGate"]


# The End
