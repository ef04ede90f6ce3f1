# -*- coding: utf-8 -*-
"""
translation

In-memory message catalog translator.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Dict, Mapping

from .contracts import Translator


class CatalogTranslator(Translator):
    """Look up labels in ``{domain: {key: message}}`` catalogs."""

    def __init__(self, catalogs: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._catalogs: Dict[str, Dict[str, str]] = {
            domain: dict(messages) for domain, messages in (catalogs or {}).items()
        }

    def add_messages(self, domain: str, messages: Mapping[str, str]) -> None:
        """Merge ``messages`` into the catalog of ``domain``."""

        self._catalogs.setdefault(domain, {}).update(messages)

    def translate(self, key: str, domain: str) -> str:
        """Return the message for ``key`` or ``key`` itself when missing."""

        return self._catalogs.get(domain, {}).get(key, key)


__all__ = ["CatalogTranslator"]


# The End
