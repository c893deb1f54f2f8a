from pathlib import Path

import pytest

import lfsserve.__main__ as cli
from lfsserve.config import get_settings
from tests.tools import clear_environment


@pytest.fixture()
def uvicorn_run(monkeypatch, tmp_path):
    clear_environment(monkeypatch)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    calls = []
    monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kargs: calls.append((app, kargs)))
    yield calls
    get_settings.cache_clear()


def test_run_defaults(uvicorn_run):
    cli.main(["run"])
    [(app, kargs)] = uvicorn_run
    assert kargs["host"] == "127.0.0.1"
    assert kargs["port"] == 8080
    assert app.state.settings.root == Path("./.lfs")


def test_run_arguments(uvicorn_run, tmp_path):
    cli.main(["run", str(tmp_path), "-s", "0.0.0.0", "-p", "9090"])
    [(app, kargs)] = uvicorn_run
    assert kargs["host"] == "0.0.0.0"
    assert kargs["port"] == 9090
    assert app.state.settings.root == tmp_path
    assert app.state.settings.port == 9090


def test_config(uvicorn_run, capsys):
    cli.main(["config"])
    out = capsys.readouterr().out
    assert "LFSSERVE_PORT=8080" in out
    assert "LFSSERVE_ROOT=.lfs" in out


def test_requires_action():
    with pytest.raises(SystemExit):
        cli.main([])
