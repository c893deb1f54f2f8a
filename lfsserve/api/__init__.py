"""lfsserve API: read-only Git LFS object server."""

import logging

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from lfsserve.api.objects import app_objects
from lfsserve.api.responses import Text, build_response
from lfsserve.config import Settings, get_settings, validate_settings
from lfsserve.errors import LfsError, NotImplementedByServer, WrongHost, WrongPath
from lfsserve.models import LFS_MEDIA_TYPE, render_error
from lfsserve.routing import has_host


def error_response(request: Request, error: LfsError):
    # Host and method errors are answered before the method is looked at, so they are rendered as for GET
    method = "GET" if error.send_body_on_head else request.method
    return build_response(method, error.status_code, LFS_MEDIA_TYPE, Text(render_error(error.message)))


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    if warning := validate_settings(settings):
        logging.warning(warning)

    app = FastAPI(
        title="lfsserve",
        description=__doc__ if __doc__ else "",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.include_router(app_objects)

    @app.exception_handler(LfsError)
    async def lfs_error_handler(request: Request, exc: LfsError):
        return error_response(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Methods outside app_objects.ALL_METHODS end up here with a 405
        if not has_host(request):
            error: LfsError = WrongHost()
        elif exc.status_code == 405:
            error = NotImplementedByServer()
        elif exc.status_code == 404:
            error = WrongPath()
        else:
            error = LfsError(str(exc.detail))
            error.status_code = exc.status_code
        return error_response(request, error)

    return app
