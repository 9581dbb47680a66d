"""FastAPI application factory.

Routes
------
    /            — HTML page with the "Start Refreshing" button
    /run-script  — runs one refresh pass and returns its log as plain text

Every other path or method answers a plain-text ``404 Not Found``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from refresher.api.routers import pages as pages_router
from refresher.config import settings

NOT_FOUND_BODY = "404 Not Found"


async def _not_found(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    # Unknown methods on known paths are treated like unknown paths.
    if exc.status_code in (404, 405):
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


def create_app(links_path: Optional[Union[str, Path]] = None) -> FastAPI:
    """Return a configured FastAPI application.

    Args:
        links_path: File read on every ``/run-script`` call.  Defaults to
            ``settings.links_file``.
    """
    app = FastAPI(
        title="Streamtape Refresher",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.links_path = Path(links_path) if links_path else settings.links_file

    app.add_exception_handler(StarletteHTTPException, _not_found)
    app.include_router(pages_router.router)

    return app


# Module-level instance used by uvicorn:
#   uvicorn refresher.api.app:app
app = create_app()
