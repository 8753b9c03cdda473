# tests/test_locator.py
"""
Tests for rootconf.locator — upward root discovery.
"""

from rootconf.locator import DEFAULT_MARKERS, MAX_SEARCH_DEPTH, locate_root
from rootconf.utils import MODULE_DIR


def test_finds_marker_in_start_dir(project):
    assert locate_root(project) == project.resolve()


def test_walks_up_from_nested_package(project):
    site_packages = project / ".venv" / "lib" / "python3.12" / "site-packages" / "rootconf"
    site_packages.mkdir(parents=True)
    assert locate_root(site_packages) == project.resolve()


def test_strict_marker_requires_bootstrap_file(tmp_path):
    (tmp_path / ".venv").mkdir()
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)
    assert locate_root(nested, markers=[".venv"]) == tmp_path.resolve()
    # Same tree, but without pyvenv.cfg the default marker does not match here.
    assert locate_root(nested, max_depth=3) is None


def test_custom_markers(tmp_path):
    (tmp_path / "pyproject.toml").write_text("")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert locate_root(nested, markers=["pyproject.toml"]) == tmp_path.resolve()


def test_step_budget(project):
    deep = project.joinpath(*[f"d{i}" for i in range(12)])
    deep.mkdir(parents=True)
    assert locate_root(deep) is None
    assert locate_root(deep, max_depth=13) == project.resolve()


def test_nearest_root_wins(project):
    inner = project / "packages" / "inner"
    (inner / ".venv").mkdir(parents=True)
    (inner / ".venv" / "pyvenv.cfg").write_text("")
    start = inner / "src"
    start.mkdir()
    assert locate_root(start) == inner.resolve()


def test_stops_at_filesystem_root(tmp_path):
    assert locate_root(tmp_path.anchor, markers=["no-such-marker-rootconf"]) is None


def test_defaults():
    assert DEFAULT_MARKERS == (".venv/pyvenv.cfg",)
    assert MAX_SEARCH_DEPTH == 10
    assert MODULE_DIR.name == "rootconf"
