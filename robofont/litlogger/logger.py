import sys
import threading
import traceback
from datetime import datetime
from typing import Dict, List, Optional

from .levels import LogLevel
from .formats import LogFormat
from .handlers import Handler, ConsoleHandler

class Logger:
    def __init__(
        self,
        name: str = "robofont",
        level: LogLevel = LogLevel.WARNING,
        handlers: Optional[List[Handler]] = None,
        fmt: str = LogFormat.DEFAULT,
    ):
        self.name = name
        self.level = LogLevel.parse(level)
        self.format = fmt
        self.handlers = handlers if handlers is not None else [ConsoleHandler()]

    def _format(self, level: LogLevel, message: str) -> str:
        now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        fields = dict(time=now, level=level.name, name=self.name, message=message)
        try:
            return self.format.format(**fields)
        except KeyError:
            # Format asks for context fields such as {thread}
            return self.format.format(thread=threading.current_thread().name, **fields)

    def set_format(self, fmt: str) -> None:
        self.format = fmt

    def set_level(self, level) -> None:
        self.level = LogLevel.parse(level)

    def add_handler(self, handler: Handler) -> None:
        self.handlers.append(handler)

    def remove_handler(self, handler: Handler) -> None:
        if handler in self.handlers:
            self.handlers.remove(handler)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def log(self, level: LogLevel, message: str) -> None:
        if not self.is_enabled_for(level):
            return
        record = self._format(level, message)
        for h in self.handlers:
            h.handle(record, level)

    def trace(self, message: str):
        self.log(LogLevel.TRACE, message)

    def debug(self, message: str):
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str):
        self.log(LogLevel.INFO, message)

    def warning(self, message: str):
        self.log(LogLevel.WARNING, message)

    def error(self, message: str):
        self.log(LogLevel.ERROR, message)

    def critical(self, message: str):
        self.log(LogLevel.CRITICAL, message)

    def exception(self, message: str):
        exc = sys.exc_info()
        formatted = f"{message}\n" + "".join(traceback.format_exception(*exc))
        self.error(formatted)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type:
            self.exception(str(exc))
        return False


_loggers: Dict[str, Logger] = {}
_loggers_lock = threading.Lock()


def get_logger(name: str = "robofont") -> Logger:
    """
    Return the shared logger for ``name``, creating it on first use.

    New loggers take their level from the ``log_level`` configuration key and
    also write to ``log_file`` when one is configured.
    """
    with _loggers_lock:
        logger = _loggers.get(name)
        if logger is None:
            logger = Logger(name=name, level=_configured_level())
            log_file = _configured_file()
            if log_file:
                from .handlers import FileHandler
                logger.add_handler(FileHandler(log_file))
            _loggers[name] = logger
        return logger


def set_global_level(level) -> None:
    """Change the level of every logger handed out by :func:`get_logger`."""
    level = LogLevel.parse(level)
    with _loggers_lock:
        for logger in _loggers.values():
            logger.set_level(level)


def _configured_level() -> LogLevel:
    from ..config import get_config
    from ..exceptions import ConfigError

    try:
        return LogLevel.parse(get_config().get("log_level", "WARNING"))
    except (ConfigError, ValueError):
        return LogLevel.WARNING


def _configured_file() -> Optional[str]:
    from ..config import get_config
    from ..exceptions import ConfigError

    try:
        return get_config().get("log_file")
    except ConfigError:
        return None
