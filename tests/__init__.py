# -*- coding: utf-8 -*-
"""
Tests package.

Shared fakes live in ``tests.conftest``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# The End
