from .core.site import SiteConfig
from .server import SpawnError, spawn

__all__ = ["SiteConfig", "SpawnError", "spawn"]
