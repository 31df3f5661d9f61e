"""
Starts a site in the current process.

``spawn`` hands the built application to uvicorn and blocks until the server
exits. It may run once per process.
"""

import logging
from typing import Callable, Dict, Optional

import uvicorn
from fastapi import FastAPI

from website.core.config import Settings
from website.core.site import SiteConfig
from website.main import create_app

logger = logging.getLogger(__name__)

RESOURCES: Dict[str, Callable[..., FastAPI]] = {
    "website": create_app,
}

_spawned = False


class SpawnError(RuntimeError):
    """Raised when a site cannot be spawned."""


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def spawn(name: str, config: SiteConfig, settings: Optional[Settings] = None) -> None:
    """Build the ``name`` resource for ``config`` and serve it until exit."""
    global _spawned

    factory = RESOURCES.get(name)
    if factory is None:
        raise SpawnError(f"Unknown resource: {name!r}")
    if _spawned:
        raise SpawnError("spawn() may only be called once per process")
    _spawned = True

    settings = settings or Settings()
    configure_logging(settings)

    app = factory(config, settings, name=name)
    logger.info("Spawning %s for %s", name, config.domain)
    logger.info("root=%s view=%s", config.root, config.view)
    logger.info("Listening on http://%s:%d", settings.HOST, settings.PORT)

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
