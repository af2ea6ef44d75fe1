"""Page routes — every path is handed to the client-side navigator."""

from __future__ import annotations

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from repo_viewer.interface.dependencies import get_navigator
from repo_viewer.interface.rendering import templates
from repo_viewer.services.navigation import Navigator

logger = logging.getLogger(__name__)

router = APIRouter()


def _raw_path(request: Request) -> str:
    """The request path as sent, so encoded slashes stay inside a segment."""
    raw = request.scope.get("raw_path")
    if raw:
        return raw.decode("latin-1")
    return quote(request.url.path)


@router.get("/{path:path}", response_class=HTMLResponse, include_in_schema=False)
async def page(
    request: Request,
    navigator: Navigator = Depends(get_navigator),
) -> HTMLResponse:
    """Render whatever view the path selects once its fetch has settled."""
    path = _raw_path(request)
    navigator.navigate(path)
    screen = await navigator.settled()
    logger.debug("Rendering %s for %s", screen.kind.value, path)
    return templates.TemplateResponse(
        request,
        screen.template_name,
        {"screen": screen},
    )
