"""Opt-in logging setup for host applications.

The package only attaches a ``NullHandler`` to the ``audit_sampling`` logger.
Applications that want the calculation trace call :func:`setup_logging` once
at startup, either with a path or with AUDIT_SAMPLING_LOG_CFG pointing to a
TOML ``logging.config.dictConfig`` file (``logging_config.toml`` in the repo
is an example).
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Optional, Union

import tomli

from audit_sampling.scripts.parameter import log_cfg_env

PACKAGE_LOGGER = "audit_sampling"


def install_null_handler() -> logging.Logger:
    """Attach a single NullHandler to the package logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())
    return package_logger


def setup_logging(cfg_path: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Configure logging from a TOML dictConfig file.

    Args:
        cfg_path: Path to the TOML file. Defaults to the value of the
            AUDIT_SAMPLING_LOG_CFG environment variable.

    Returns:
        The ``audit_sampling`` package logger

    Raises:
        FileNotFoundError: If the configured path is not a file
        ValueError: If the file is not valid TOML or not a dictConfig schema
    """
    cfg_path = cfg_path or os.getenv(log_cfg_env)
    if not cfg_path:
        return install_null_handler()

    cfg_path = Path(cfg_path)
    if not cfg_path.is_file():
        raise FileNotFoundError(f"Logging config not found at {cfg_path}")

    with cfg_path.open("rb") as f:
        try:
            cfg = tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise ValueError(f"Invalid logging config {cfg_path}: {e}") from e

    if cfg.get("version") != 1:
        raise ValueError(f"Logging config {cfg_path} must set version = 1")

    logging.config.dictConfig(cfg)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.debug(f"Logging configured from {cfg_path}")
    return package_logger
