#!/usr/bin/env python3
"""ロガーのテスト"""
import logging

from s3_file_upload.models.config import LoggingConfig
from s3_file_upload.utils.logger import LoggerManager, LOGGER_NAME


def test_logger(tmp_path):
    """ロガーが正しく動作するか確認"""
    log_file = tmp_path / "logs" / "s3_file_upload.log"
    logger = LoggerManager.setup(LoggingConfig(level="warning", file=str(log_file)))

    assert logger.level == logging.WARNING
    assert LoggerManager.get_logger() is logger
    assert len(logger.handlers) == 2

    logger.info("not written")
    logger.warning("written")
    for handler in logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "WARNING - written" in content
    assert "not written" not in content


def test_setup_is_idempotent():
    first = LoggerManager.setup(LoggingConfig(level="DEBUG"))
    second = LoggerManager.setup(LoggingConfig(level="ERROR"))
    assert first is second
    assert second.level == logging.DEBUG


def test_get_logger_before_setup():
    logger = LoggerManager.get_logger()
    assert logger.name == LOGGER_NAME
