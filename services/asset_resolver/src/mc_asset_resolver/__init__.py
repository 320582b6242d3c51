"""Minecraft asset resolver service package."""

from .app import create_app
from .service import ItemResolution, ResolveService
from .version import __version__

__all__ = ["create_app", "ItemResolution", "ResolveService", "__version__"]
