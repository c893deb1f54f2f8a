"""API Endpoints for LFS object metadata and downloads."""

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from lfsserve.api.responses import Stream, Text, build_response
from lfsserve.config import Settings
from lfsserve.errors import NotImplementedByServer, WrongHost, WrongPath
from lfsserve.models import LFS_MEDIA_TYPE, render_metadata
from lfsserve.objects import ObjectStore
from lfsserve.routing import Intent, has_host, object_links, route

OCTET_STREAM = "application/octet-stream"

READ_METHODS = {"GET", "HEAD"}

# Every request is routed here, so unsupported methods can be answered with 501 rather than 405
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]

app_objects = APIRouter(prefix="", tags=["objects"])


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(settings: Settings = Depends(get_app_settings)) -> ObjectStore:
    return ObjectStore(settings.root)


@app_objects.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
def serve_object(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    store: ObjectStore = Depends(get_store),
) -> Response:
    """
    Serve object metadata (GET/HEAD /objects/<oid>) or object bytes (GET/HEAD /data/objects/<oid>).

    Uploads and the batch API are not implemented.
    """
    if not has_host(request):
        raise WrongHost()
    if request.method not in READ_METHODS:
        raise NotImplementedByServer()
    match = route(request.url.path)
    if match is None:
        raise WrongPath()
    oid, intent = match
    if intent == Intent.METADATA:
        return object_metadata(request, settings, store, oid)
    return object_data(request, store, oid)


def object_metadata(request: Request, settings: Settings, store: ObjectStore, oid: str) -> Response:
    size = store.stat(oid)
    self_url, download_url = object_links(request.url, settings.port, oid)
    metadata = render_metadata(oid, size, self_url, download_url)
    return build_response(request.method, 200, LFS_MEDIA_TYPE, Text(metadata))


def object_data(request: Request, store: ObjectStore, oid: str) -> Response:
    file = store.open(oid)
    return build_response(request.method, 200, OCTET_STREAM, Stream(file))
