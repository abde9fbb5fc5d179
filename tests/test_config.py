import logging
from pathlib import Path

import pytest

from hztimeline.catalog import DEFAULT_CATALOG_PATH
from hztimeline.config import load_settings
from hztimeline.logging_config import setup_logging

_VARS = ["HZT_CATALOG_PATH", "HZT_LOG_LEVEL", "HZT_LOG_FILE", "HZT_DEFAULT_DISTANCE", "HZT_RESULTS_DIR"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.catalog_path == DEFAULT_CATALOG_PATH
    assert settings.log_level == "INFO"
    assert settings.log_file is None
    assert settings.default_distance == 1.0
    assert settings.results_dir.name == "results"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HZT_CATALOG_PATH", str(tmp_path / "stars.json"))
    monkeypatch.setenv("HZT_LOG_LEVEL", "debug")
    monkeypatch.setenv("HZT_DEFAULT_DISTANCE", "1.7")
    monkeypatch.setenv("HZT_RESULTS_DIR", str(tmp_path))
    settings = load_settings()
    assert settings.catalog_path == tmp_path / "stars.json"
    assert settings.log_level == "DEBUG"
    assert settings.default_distance == 1.7
    assert settings.results_dir == tmp_path


@pytest.mark.parametrize("raw", ["far", "0", "-2"])
def test_bad_distance_falls_back(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("HZT_DEFAULT_DISTANCE", raw)
    assert load_settings().default_distance == 1.0


def test_setup_logging_does_not_stack_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "hz.log"
    setup_logging("DEBUG")
    setup_logging(logging.INFO, str(log_file))
    logger = logging.getLogger("hztimeline")
    try:
        assert len(logger.handlers) == 2
        assert logger.level == logging.INFO
        logging.getLogger("hztimeline.compute").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hztimeline.compute - INFO - hello" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
