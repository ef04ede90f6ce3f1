"""
__init__

Admin menu package entry point.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .conf import MenuSettings, configure, current_settings
from .core.builder import BuildState, MenuItemBuilder
from .core.dto import MenuItemSpec, ResolvedMenuItem
from .core.items import MenuItem
from .core.types import MenuItemType, Permission
from .meta import __version__

# The End
