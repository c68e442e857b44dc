import logging
from pathlib import Path

import pytest

import audit_sampling
from audit_sampling.scripts.logger import install_null_handler, setup_logging

LOGGING_TOML = """
version = 1
disable_existing_loggers = false

[handlers.console]
class = "logging.StreamHandler"
level = "DEBUG"

[loggers.audit_sampling]
handlers = ["console"]
level = "WARNING"
propagate = false
"""


@pytest.fixture
def package_logger():
    logger = logging.getLogger("audit_sampling")
    handlers = logger.handlers[:]
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def _null_handlers(logger: logging.Logger) -> list:
    return [h for h in logger.handlers if isinstance(h, logging.NullHandler)]


def test_package_import_installs_null_handler(package_logger) -> None:
    assert audit_sampling.setup_logging is setup_logging
    assert len(_null_handlers(package_logger)) == 1


def test_without_config_only_null_handler_is_kept(
    monkeypatch: pytest.MonkeyPatch, package_logger
) -> None:
    monkeypatch.delenv("AUDIT_SAMPLING_LOG_CFG", raising=False)
    assert setup_logging() is package_logger
    install_null_handler()
    assert len(_null_handlers(package_logger)) == 1


def test_config_file_from_environment_is_applied(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, package_logger
) -> None:
    cfg = tmp_path / "logging.toml"
    cfg.write_text(LOGGING_TOML, encoding="utf-8")
    monkeypatch.setenv("AUDIT_SAMPLING_LOG_CFG", str(cfg))
    setup_logging()
    assert package_logger.level == logging.WARNING
    assert any(
        isinstance(handler, logging.StreamHandler)
        for handler in package_logger.handlers
    )


def test_config_path_argument_wins_over_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, package_logger
) -> None:
    cfg = tmp_path / "logging.toml"
    cfg.write_text(LOGGING_TOML.replace('"WARNING"', '"ERROR"'), encoding="utf-8")
    monkeypatch.setenv("AUDIT_SAMPLING_LOG_CFG", str(tmp_path / "missing.toml"))
    setup_logging(cfg)
    assert package_logger.level == logging.ERROR


def test_missing_config_file_raises(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, package_logger
) -> None:
    monkeypatch.setenv("AUDIT_SAMPLING_LOG_CFG", str(tmp_path / "missing.toml"))
    with pytest.raises(FileNotFoundError):
        setup_logging()
    with pytest.raises(FileNotFoundError):
        setup_logging(tmp_path)


@pytest.mark.parametrize("contents", ["version = ", "[loggers]\n"])
def test_invalid_config_raises_value_error(
    tmp_path: Path, contents, package_logger
) -> None:
    cfg = tmp_path / "logging.toml"
    cfg.write_text(contents, encoding="utf-8")
    with pytest.raises(ValueError):
        setup_logging(cfg)
