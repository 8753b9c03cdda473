# tests/test_utils.py
"""
Tests for rootconf.utils — resolving explicit root paths.
"""

from rootconf.store import ConfigStore
from rootconf.utils import expand_path, resolve_path


def test_none_passes_through():
    assert expand_path(None) is None
    assert resolve_path(None) is None


def test_root_path_from_env_var(tmp_path, monkeypatch):
    monkeypatch.setenv("ROOTCONF_TEST_HOME", str(tmp_path))
    cfg = ConfigStore(root_path="$ROOTCONF_TEST_HOME")
    assert cfg.get_root_path() == tmp_path.resolve()


def test_relative_root_path_is_absolute(tmp_path, monkeypatch):
    (tmp_path / "app").mkdir()
    monkeypatch.chdir(tmp_path)
    assert resolve_path("app/../app") == (tmp_path / "app").resolve()
