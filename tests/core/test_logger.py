"""Tests for the loguru sink setup driven by Settings."""

from loguru import logger

from menu_admin.config.settings import Settings, settings
from menu_admin.core.logger import setup_logger


def test_file_sink_renders_structured_context(tmp_path):
    log_file = tmp_path / "logs" / "highlights.log"
    setup_logger(Settings(HIGHLIGHTS_LOG_LEVEL="debug", HIGHLIGHTS_LOG_FILE=str(log_file)))
    try:
        logger.info("Product added to day", day_id=2, product_id=101)
    finally:
        # Removing the sinks closes the file before it is read
        setup_logger(settings)

    content = log_file.read_text(encoding="utf-8")
    assert "Logger initialized" in content
    assert "Product added to day" in content
    assert "'day_id': 2" in content


def test_invalid_level_falls_back_to_info():
    assert Settings(HIGHLIGHTS_LOG_LEVEL="verbose").log_level == "INFO"
