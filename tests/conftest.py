import pytest
from httpx import ASGITransport, AsyncClient

from lfsserve.api import create_app
from lfsserve.config import Settings
from tests.tools import store_object


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def settings(tmp_path) -> Settings:
    (tmp_path / "objects").mkdir()
    return Settings(root=tmp_path, host="127.0.0.1", port=8080)


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test", follow_redirects=False) as client:
        yield client


@pytest.fixture()
def content() -> bytes:
    return b"my beautiful large file bytes"


@pytest.fixture()
def oid(settings, content) -> str:
    """The oid of an object that is present in the store"""
    return store_object(settings.root, content)
