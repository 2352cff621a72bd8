"""
SimplyMaid — couche configuration + schémas de contenu du site marketing.

Usage:
    >>> from simplymaid import AppContext
    >>> ctx = AppContext()
    >>> page = ctx.builder.create_page("city", "/sydney/house-cleaning")
    >>> ctx.validate_page(page, resolve_shared=True)
    >>> ctx.seo.apply()
"""
from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .core.config import APP_VERSION
from .theme import ThemeConfig

__version__ = APP_VERSION

__all__ = [*_core_all, "ThemeConfig"]
