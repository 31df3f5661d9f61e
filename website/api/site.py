"""Site resource: renders views and serves static files from the document root."""

import os
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from website.core.site import SiteConfig

VIEW_SUFFIX = ".html"
INDEX_VIEW = "index" + VIEW_SUFFIX


def view_candidates(page_path: str) -> List[str]:
    """
    Template names that may render ``page_path``, in lookup order.

    "" -> index.html, "about" -> about.html, about/index.html.
    Segments starting with "_" or "." name partials and hidden files and
    are never rendered directly.
    """
    page = page_path.strip("/")
    if not page:
        return [INDEX_VIEW]
    if any(not part or part[0] in "_." for part in page.split("/")):
        return []
    candidates = []
    if page.endswith(VIEW_SUFFIX):
        candidates.append(page)
    candidates.append(page + VIEW_SUFFIX)
    candidates.append(f"{page}/{INDEX_VIEW}")
    return candidates


def resolve_view(view_dir: Path, page_path: str) -> Optional[str]:
    """Return the first existing view for ``page_path`` under ``view_dir``."""
    base = view_dir.resolve()
    for name in view_candidates(page_path):
        candidate = (base / name).resolve()
        if candidate.is_relative_to(base) and candidate.is_file():
            return name
    return None


def static_path(page_path: str) -> str:
    # same normalisation StaticFiles applies to a mounted route path
    return os.path.normpath(os.path.join(*page_path.split("/")))


def add_site_routes(app: FastAPI, site: SiteConfig) -> None:
    """
    Register the catch-all page route on ``app`` itself.

    The route stays in ``app.routes`` so SlowAPIMiddleware can find its
    endpoint and apply the default limits.
    """
    templates = Jinja2Templates(directory=str(site.view))
    static = StaticFiles(directory=str(site.root), html=True)

    async def serve(request: Request, page_path: str) -> Response:
        view_name = resolve_view(site.view, page_path)
        if view_name is not None:
            return templates.TemplateResponse(
                request,
                view_name,
                {"site": site, "page": page_path},
            )
        return await static.get_response(static_path(page_path), request.scope)

    app.add_api_route(
        "/{page_path:path}",
        serve,
        methods=["GET", "HEAD"],
        include_in_schema=False,
    )
