import pytest
from starlette.datastructures import URL

from lfsserve.routing import Intent, object_links, route

OID = "0123456789abcdef" * 4


def test_route():
    assert route(f"/objects/{OID}") == (OID, Intent.METADATA)
    assert route(f"/data/objects/{OID}") == (OID, Intent.RAW_OBJECT)


@pytest.mark.parametrize(
    "path",
    [
        "/objects/short",
        f"/other/{OID}",
        f"/objects/{OID.upper()}",
        f"/objects/{OID}/",
        f"/objects/x/{OID}",
        f"/data/{OID}",
        f"/data/objects/{OID}/extra",
        f"objects/{OID}",
        "/objects/batch",
        "/",
        "",
    ],
)
def test_route_no_match(path):
    assert route(path) is None


def test_links():
    url = URL(f"https://example.com:1234/objects/{OID}?x=1#frag")
    self_url, download_url = object_links(url, 8080, OID)
    assert self_url == f"http://example.com:8080/objects/{OID}"
    assert download_url == f"http://example.com:8080/data/objects/{OID}"


def test_links_default_port():
    url = URL(f"http://example.com:8080/objects/{OID}")
    self_url, download_url = object_links(url, 80, OID)
    assert self_url == f"http://example.com/objects/{OID}"
    assert download_url == f"http://example.com/data/objects/{OID}"
