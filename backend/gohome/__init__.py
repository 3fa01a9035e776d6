# gohome/__init__.py
__version__ = "0.1.0"

from contextlib import asynccontextmanager
import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from gohome.core.config import Settings, settings as default_settings
from gohome.core.exceptions import RenderError, TemplateSetupError
from gohome.api.router import api_router
from gohome.services.cluster import ClusterConnection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(app: FastAPI):
    # Startup: connect to the cluster unless a connection was injected
    if getattr(app.state, "connection", None) is None:
        app.state.connection = ClusterConnection.connect()
    if not app.state.connection.available:
        logger.info("Serving demo data, no Kubernetes cluster available")

    yield


def _load_templates(templates_dir: str) -> Jinja2Templates:
    """Load templates and check the homepage template compiles"""
    templates = Jinja2Templates(directory=templates_dir)
    try:
        templates.get_template("index.html")
    except TemplateError as e:
        raise TemplateSetupError(
            f"Failed to load templates from {templates_dir}: {e}"
        ) from e
    return templates


def create_app(
    settings: Optional[Settings] = None,
    connection: Optional[ClusterConnection] = None,
) -> FastAPI:
    """Factory function to create the GoHome app.

    Raises:
        TemplateSetupError: if templates or static assets cannot be loaded
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=app_lifespan,
    )

    app.state.settings = settings
    app.state.connection = connection
    app.state.templates = _load_templates(settings.TEMPLATES_DIR)

    try:
        app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")
    except RuntimeError as e:
        # StaticFiles checks the directory exists
        raise TemplateSetupError(str(e)) from e

    @app.exception_handler(RenderError)
    async def render_error_handler(request: Request, exc: RenderError):
        logger.error(f"{exc}")
        return PlainTextResponse("Internal Server Error", status_code=500)

    app.include_router(api_router)

    return app


# Export the factory for uvicorn (--factory) and tests
__all__ = ["create_app", "__version__"]
