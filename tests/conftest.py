import os
import json

import pytest

from rootconf import store


@pytest.fixture(autouse=True)
def isolated_default_store():
    """Every test starts and ends without a default store or custom options."""
    store.configure()
    yield
    store.configure()


@pytest.fixture(autouse=True)
def restore_environ():
    """Undo variables applied by .env loading, which monkeypatch cannot see."""
    saved = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture
def project(tmp_path):
    """A project root with a `.venv/pyvenv.cfg` marker and an empty config dir."""
    (tmp_path / ".venv").mkdir()
    (tmp_path / ".venv" / "pyvenv.cfg").write_text("home = /usr/bin\n")
    (tmp_path / "config").mkdir()
    return tmp_path


def write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))
    return path


def write_text(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path
