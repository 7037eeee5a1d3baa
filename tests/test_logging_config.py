import logging

from import_precheck.config import load_config
from import_precheck.logging_config import ColoredFormatter, configure_from_config, get_logger, setup_logging


def test_setup_logging_file_handler(tmp_path):
    log_file = tmp_path / "precheck.log"

    logger = setup_logging("WARNING", log_file=str(log_file))
    get_logger("checks.os_version").debug("derived centos-7")
    for handler in logger.handlers:
        handler.flush()

    assert logger.name == "import_precheck"
    assert len(logger.handlers) == 2
    text = log_file.read_text(encoding="utf-8")
    assert "DEBUG - " in text
    assert "derived centos-7" in text

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def test_setup_logging_replaces_handlers():
    setup_logging("INFO")
    logger = setup_logging("DEBUG", verbose=True)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    logger.handlers.clear()


def test_configure_from_config(tmp_path):
    config = load_config(None)
    config.logging.level = "ERROR"
    config.logging.log_file = str(tmp_path / "precheck.log")

    logger = configure_from_config(config.logging)

    assert logger.level == logging.DEBUG
    assert [h.level for h in logger.handlers] == [logging.ERROR, logging.DEBUG]
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def test_colored_formatter_keeps_record_levelname():
    record = logging.LogRecord("import_precheck", logging.WARNING, __file__, 1, "centos-6 rejected", None, None)

    formatted = ColoredFormatter("%(levelname)s - %(message)s").format(record)

    assert formatted == "\033[33mWARNING\033[0m - centos-6 rejected"
    assert record.levelname == "WARNING"
