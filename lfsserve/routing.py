"""
Map request paths onto object ids and build the links returned in object metadata.

There are two kinds of object urls:

- /objects/<oid>: JSON metadata for the object
- /data/objects/<oid>: the raw object bytes
"""

from enum import Enum

from starlette.datastructures import URL
from starlette.requests import Request

from lfsserve.objects import is_oid

DEFAULT_HTTP_PORT = 80


class Intent(str, Enum):
    #: client wants the JSON metadata for the object
    METADATA = "metadata"

    #: client wants the object bytes
    RAW_OBJECT = "raw_object"


INTENT_PREFIXES = {
    "/objects": Intent.METADATA,
    "/data/objects": Intent.RAW_OBJECT,
}


def route(path: str) -> tuple[str, Intent] | None:
    """
    Parse the request path into an (oid, intent) pair.
    Returns None if the path is not an object url or the oid is not valid.
    """
    prefix, _, oid = path.rpartition("/")
    intent = INTENT_PREFIXES.get(prefix)
    if intent is None or not is_oid(oid):
        return None
    return oid, intent


def has_host(request: Request) -> bool:
    return bool(request.headers.get("host"))


def link(url: URL, port: int, path: str) -> str:
    """Rewrite the request url into a plain http url to path, leaving out the port if it is the default"""
    url = url.replace(
        scheme="http",
        port=None if port == DEFAULT_HTTP_PORT else port,
        path=path,
        query="",
        fragment="",
    )
    return str(url)


def object_links(url: URL, port: int, oid: str) -> tuple[str, str]:
    """Return the (self, download) links for an object"""
    return link(url, port, f"/objects/{oid}"), link(url, port, f"/data/objects/{oid}")
