# tests/test_config_logging.py

from __future__ import annotations

from scifi_classes import config as config_module
from scifi_classes import utils
from scifi_classes.config import CONFIG_PATH, get_config
from scifi_classes.logging import get_logger, list_active_loggers
from scifi_classes.utils import default_quotes_path, project_root


def test_config_file_is_present() -> None:
    assert CONFIG_PATH.is_file()


def test_config_defaults() -> None:
    cfg = get_config()
    assert cfg.delimiter == "|"
    assert cfg.selection in ("random", "first")
    assert cfg.default_name == "Anonymous"


def test_get_config_is_cached() -> None:
    assert get_config() is get_config()


def test_default_quotes_path_points_into_project() -> None:
    path = default_quotes_path()
    assert path.is_file()
    assert project_root() in path.parents


def test_get_logger_namespaces_module_loggers() -> None:
    log = get_logger("tests.sample")
    assert log.name == "scifi_classes.tests.sample"
    assert log.propagate is True
    assert "scifi_classes.tests.sample" in list_active_loggers()


def test_get_logger_keeps_package_names() -> None:
    log = get_logger("scifi_classes.quotes.store")
    assert log.name == "scifi_classes.quotes.store"


def test_load_config_falls_back_to_defaults_without_file(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv(config_module.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(config_module, "CONFIG_PATH", tmp_path / "missing.yml")

    cfg = config_module.load_config()

    assert cfg.delimiter == "|"
    assert cfg.selection == "random"
    assert cfg.default_name == "Anonymous"
    assert cfg.debug is False


def test_load_config_honours_env_override(tmp_path, monkeypatch) -> None:
    path = tmp_path / "custom.yml"
    path.write_text(
        "quotes:\n  delimiter: ';'\n  selection: first\nperson:\n  default_name: Ensign\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(path))

    cfg = config_module.load_config()

    assert cfg.delimiter == ";"
    assert cfg.selection == "first"
    assert cfg.default_name == "Ensign"


def test_tests_data_path_is_not_collected() -> None:
    assert utils.tests_data_path.__test__ is False


def test_logging_package_exports_only_logger_factory() -> None:
    import scifi_classes.logging as sc_logging

    assert sorted(sc_logging.__all__) == ["get_logger", "list_active_loggers"]
    assert not hasattr(sc_logging, "log_info")
