# tests/test_helpers.py
"""
Tests for the free-function helpers (`config`, `env`) and the static
`Config` facade.
"""

import pytest

from rootconf.exceptions import ConfigKeyNotFoundError
from rootconf.facade import Config
from rootconf.helpers import coerce_env_value, config, env
from rootconf.store import ConfigStore, configure, get_store

from conftest import write_json


@pytest.fixture
def default_project(project):
    write_json(project / "config" / "app.json", {"name": "Test App", "env": "testing"})
    write_json(project / "config" / "services" / "mail.json", {"driver": "smtp"})
    write_json(project / "settings.json", {"theme": "dark"})
    configure(root_path=project)
    return project


# ---------------------------------------------------------------------------
# env()
# ---------------------------------------------------------------------------


class TestEnv:

    @pytest.fixture(autouse=True)
    def empty_root(self, tmp_path):
        configure(root_path=tmp_path)

    def test_plain_string(self, monkeypatch):
        monkeypatch.setenv("ROOTCONF_TEST_VAR", "some_value")
        assert env("ROOTCONF_TEST_VAR") == "some_value"

    def test_missing_returns_default(self, monkeypatch):
        monkeypatch.delenv("ROOTCONF_TEST_VAR", raising=False)
        assert env("ROOTCONF_TEST_VAR") is None
        assert env("ROOTCONF_TEST_VAR", "default") == "default"

    @pytest.mark.parametrize("raw, expected", [
        ("true", True), ("TRUE", True), ("(true)", True),
        ("false", False), ("False", False), ("(false)", False),
        ("null", None), ("NULL", None), ("(null)", None),
        ("empty", ""), ("(Empty)", ""),
    ])
    def test_literals(self, monkeypatch, raw, expected):
        monkeypatch.setenv("ROOTCONF_TEST_VAR", raw)
        value = env("ROOTCONF_TEST_VAR", "default")
        assert value == expected
        assert type(value) is type(expected)

    def test_numeric_strings_kept_by_default(self, monkeypatch):
        monkeypatch.setenv("ROOTCONF_TEST_VAR", "7")
        assert env("ROOTCONF_TEST_VAR") == "7"

    @pytest.mark.parametrize("raw, expected", [
        ("7", 7), ("-456", -456), ("3.14", 3.14), ("1.5e3", 1500.0), ("+5", 5.0), (".5", 0.5),
    ])
    def test_numeric_conversion(self, monkeypatch, raw, expected):
        monkeypatch.setenv("ROOTCONF_TEST_VAR", raw)
        value = env("ROOTCONF_TEST_VAR", convert_numeric=True)
        assert value == expected
        assert type(value) is type(expected)

    def test_non_numeric_not_converted(self, monkeypatch):
        monkeypatch.setenv("ROOTCONF_TEST_VAR", "12abc")
        assert env("ROOTCONF_TEST_VAR", convert_numeric=True) == "12abc"

    def test_reads_project_env_file(self, project, monkeypatch):
        monkeypatch.delenv("ROOTCONF_TEST_FLAG", raising=False)
        (project / ".env").write_text("ROOTCONF_TEST_FLAG=(true)\n")
        configure(root_path=project)
        assert env("ROOTCONF_TEST_FLAG") is True
        assert get_store().environ["ROOTCONF_TEST_FLAG"] == "(true)"


def test_coerce_non_string_passthrough():
    assert coerce_env_value(5, convert_numeric=True) == 5
    assert coerce_env_value("inf", convert_numeric=True) == "inf"


# ---------------------------------------------------------------------------
# config()
# ---------------------------------------------------------------------------


class TestConfigHelper:

    def test_returns_store_without_key(self, default_project):
        assert isinstance(config(), ConfigStore)
        assert config() is get_store()

    def test_get(self, default_project):
        assert config("app.name") == "Test App"
        assert config("services.mail.driver") == "smtp"
        assert config("app.missing", "d") == "d"


# ---------------------------------------------------------------------------
# Config facade
# ---------------------------------------------------------------------------


class TestFacade:

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            Config()

    def test_read_operations(self, default_project):
        assert Config.get("app.env") == "testing"
        assert Config.has("services.mail")
        assert not Config.has("services.cache")
        assert set(Config.all()) == {"app", "services.mail"}
        assert Config.get_root_path() == default_project.resolve()

    def test_set_and_reset(self, default_project):
        assert Config.set("app.name", "changed")
        assert not Config.set("app.unknown", 1)
        assert Config.get("app.name") == "changed"
        Config.reset()
        assert Config.get("app.name") == "Test App"

    def test_set_or_fail(self, default_project):
        Config.set_or_fail("app.env", "production")
        assert Config.get("app.env") == "production"
        with pytest.raises(ConfigKeyNotFoundError):
            Config.set_or_fail("app.unknown", 1)

    def test_root_files(self, default_project):
        assert Config.load_from_root("settings", "theme") == "dark"
        assert Config.set_from_root("settings", "font.size", 12)
        assert Config.get("settings.font.size") == 12
        assert not Config.set_from_root("settings", "font.family", "mono", False)
