import logging

from fastapi import FastAPI, Request
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from website.core.config import Settings
from website.core.site import SiteConfig

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def create_limiter(settings: Settings) -> Limiter:
    return Limiter(key_func=get_remote_address, default_limits=[settings.RATE_LIMIT])


def get_allowed_hosts(site: SiteConfig, settings: Settings) -> list[str]:
    """Return trusted hosts for the site depending on environment."""
    hosts = list(site.hosts)
    if not settings.is_production:
        hosts.extend(host for host in settings.LOCAL_HOSTS if host not in hosts)
    return hosts


def setup_middlewares(app: FastAPI, site: SiteConfig, settings: Settings, limiter: Limiter) -> None:
    """Register common middlewares (rate limiter, trusted host, security headers)."""
    # rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # trusted hosts
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=get_allowed_hosts(site, settings),
    )

    # security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        return response


def setup_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Register global exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "status_code": exc.status_code},
            headers=getattr(exc, "headers", None),
        )

    # runs in ServerErrorMiddleware, outside the security headers middleware
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error while serving %s", request.url.path)
        if settings.is_production:
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error", "status_code": 500},
                headers=SECURITY_HEADERS,
            )
        return JSONResponse(
            status_code=500,
            content={"error": str(exc), "status_code": 500},
            headers=SECURITY_HEADERS,
        )
