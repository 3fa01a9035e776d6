# gohome/api/home.py
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from jinja2 import TemplateError

from gohome.core.exceptions import RenderError
from gohome.services.homepage import HomepageComposer

router = APIRouter()

logger = logging.getLogger(__name__)


def get_composer(request: Request) -> HomepageComposer:
    """Build a composer over the connection shared by the app"""
    state = request.app.state
    return HomepageComposer.from_settings(state.connection, state.settings)


@router.get("/", response_class=HTMLResponse)
async def get_homepage(
    request: Request,
    composer: HomepageComposer = Depends(get_composer),
):
    """Render the homepage with bookmarks and cluster ingresses."""
    page = await composer.compose()

    templates = request.app.state.templates
    try:
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "page": page,
                "title": page.title,
                "bookmarks": page.bookmarks,
                "ingresses": page.ingresses,
                "demo_mode": page.demo_mode,
                "error": page.error,
            },
        )
    except TemplateError as e:
        raise RenderError(f"Error rendering template: {e}") from e


@router.get("/health", response_class=PlainTextResponse)
async def health():
    return "OK"
