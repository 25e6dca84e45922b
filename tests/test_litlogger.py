import io

import pytest

from robofont.litlogger import ConsoleHandler, FileHandler, LogFormat, Logger, LogLevel, get_logger


def make_logger(level=LogLevel.INFO, fmt=LogFormat.SIMPLE):
    stream = io.StringIO()
    logger = Logger(name="test", level=level, handlers=[ConsoleHandler(stream=stream)], fmt=fmt)
    return logger, stream


def test_level_filtering():
    logger, stream = make_logger(LogLevel.INFO)
    logger.debug("hidden")
    logger.info("shown")
    logger.error("also shown")
    assert stream.getvalue() == "INFO: shown\nERROR: also shown\n"


def test_handler_level_filtering():
    stream = io.StringIO()
    logger = Logger(level=LogLevel.TRACE, handlers=[ConsoleHandler(stream=stream, level=LogLevel.WARNING)], fmt=LogFormat.SIMPLE)
    logger.info("quiet")
    logger.warning("loud")
    assert stream.getvalue() == "WARNING: loud\n"


def test_console_handler_color_only_when_requested():
    stream = io.StringIO()
    ConsoleHandler(stream=stream, color=True).emit("x", LogLevel.ERROR)
    assert stream.getvalue() == "\033[31mx\033[0m\n"


def test_default_format_fields():
    logger, stream = make_logger(fmt=LogFormat.DEFAULT)
    logger.info("hello")
    parts = stream.getvalue().strip().split(" | ")
    assert parts[1:] == ["INFO", "test", "hello"]


def test_detailed_format_adds_thread():
    logger, stream = make_logger(fmt=LogFormat.DETAILED)
    logger.warning("w")
    assert "Thread: MainThread" in stream.getvalue()


def test_set_level_accepts_names():
    logger, stream = make_logger(LogLevel.ERROR)
    logger.set_level("debug")
    logger.debug("now visible")
    assert "now visible" in stream.getvalue()


def test_parse_rejects_unknown_level():
    with pytest.raises(ValueError):
        LogLevel.parse("loud")


def test_exception_includes_traceback():
    logger, stream = make_logger()
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("failed")
    assert "failed" in stream.getvalue()
    assert "RuntimeError: boom" in stream.getvalue()


def test_file_handler_rotation(tmp_path):
    path = tmp_path / "logs" / "robofont.log"
    handler = FileHandler(str(path), max_bytes=20, backups=2)
    logger = Logger(level=LogLevel.INFO, handlers=[handler], fmt=LogFormat.SIMPLE)
    for i in range(6):
        logger.info(f"message {i}")
    handler.close()
    assert (tmp_path / "logs" / "robofont.log.1").exists()
    assert (tmp_path / "logs" / "robofont.log.2").exists()
    assert not (tmp_path / "logs" / "robofont.log.3").exists()


def test_get_logger_is_shared():
    assert get_logger("robofont.shared") is get_logger("robofont.shared")
