from typing import Optional

from fastapi import FastAPI

from website.api.site import add_site_routes
from website.core.config import Settings
from website.core.security import create_limiter, setup_exception_handlers, setup_middlewares
from website.core.site import SiteConfig


def create_app(config: SiteConfig, settings: Optional[Settings] = None, name: str = "website") -> FastAPI:
    settings = settings or Settings()
    app = FastAPI(title=name, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.site = config
    app.state.settings = settings

    limiter = create_limiter(settings)
    setup_middlewares(app, config, settings, limiter)
    setup_exception_handlers(app, settings)

    add_site_routes(app, config)

    return app
