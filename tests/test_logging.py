# Copyright 2026 Joinport Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for joinport logging setup."""

import logging
from pathlib import Path

from joinport.logging import configure_logging, get_logger


def test_get_logger_uses_joinport_hierarchy() -> None:
    assert get_logger("library.merge").name == "joinport.library.merge"
    assert get_logger().name == "joinport"


def test_configure_logging_levels() -> None:
    assert configure_logging().level == logging.INFO
    assert configure_logging(verbose=True).level == logging.DEBUG


def test_configure_logging_does_not_duplicate_handlers() -> None:
    configure_logging()
    logger = configure_logging()
    assert len(logger.handlers) == 1


def test_configure_logging_with_file(tmp_path: Path) -> None:
    log_file = tmp_path / "joinport.log"
    configure_logging(verbose=True, log_file=log_file)
    get_logger("test").debug("hello from the test")
    configure_logging()

    assert "hello from the test" in log_file.read_text(encoding="utf-8")
