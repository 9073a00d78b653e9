"""Server-rendered pages resolved through the navigation controller."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.api.deps import RepositoryDependency
from app.core.config import settings
from app.web.navigation import NavigationController

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "web" / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"])


@router.get("/{full_path:path}", response_class=HTMLResponse, include_in_schema=False)
def render_page(full_path: str, request: Request, repository: RepositoryDependency):
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    nav: NavigationController = request.app.state.navigation
    resolution = nav.resolve(request.url.path)
    view = resolution.view

    context = {
        "app_name": settings.APP_NAME,
        "view": view,
        "path": resolution.path,
        "nav_links": nav.nav_links(),
        "urls": {route.view.name: nav.url_for(route.view.name) for route in nav.routes},
    }
    context.update(view.context(repository))

    return templates.TemplateResponse(
        request,
        view.template,
        context,
        status_code=view.status_code,
    )
