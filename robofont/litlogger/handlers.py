import sys
import threading
from pathlib import Path
from typing import Optional, TextIO

from .levels import LogLevel

RESET = "\033[0m"
LEVEL_COLORS = {
    LogLevel.TRACE: "\033[90m",
    LogLevel.DEBUG: "\033[36m",
    LogLevel.INFO: "\033[32m",
    LogLevel.WARNING: "\033[33m",
    LogLevel.ERROR: "\033[31m",
    LogLevel.CRITICAL: "\033[41m\033[97m",
}

class Handler:
    def __init__(self, level: LogLevel = LogLevel.TRACE):
        self.level = level
        self._lock = threading.Lock()

    def handle(self, message: str, level: LogLevel) -> None:
        if level < self.level:
            return
        with self._lock:
            self.emit(message, level)

    def emit(self, message: str, level: LogLevel) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass

class ConsoleHandler(Handler):
    """Write records to a text stream, colorized when the stream is a terminal.

    Defaults to stderr so banners printed on stdout stay clean.
    """

    def __init__(self, stream: Optional[TextIO] = None, level: LogLevel = LogLevel.TRACE, color: Optional[bool] = None):
        super().__init__(level)
        self.stream = stream or sys.stderr
        if color is None:
            isatty = getattr(self.stream, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color

    def emit(self, message: str, level: LogLevel) -> None:
        if self.color:
            message = f"{LEVEL_COLORS.get(level, '')}{message}{RESET}"
        self.stream.write(message + "\n")
        self.stream.flush()

class FileHandler(Handler):
    """Append records to a file, rotating to ``<name>.1 .. <name>.N`` past ``max_bytes``."""

    def __init__(self, path: str, level: LogLevel = LogLevel.TRACE, max_bytes: int = 0, backups: int = 0):
        super().__init__(level)
        self.path = Path(path).expanduser()
        self.max_bytes = max_bytes
        self.backups = backups
        self._open()

    def _open(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.path, "a", encoding="utf-8")

    def _backup_path(self, index: int) -> Path:
        return self.path.with_name(f"{self.path.name}.{index}")

    def _rotate(self) -> None:
        self._file.close()
        if self.backups <= 0:
            self.path.unlink(missing_ok=True)
            self._open()
            return
        for i in range(self.backups - 1, 0, -1):
            src = self._backup_path(i)
            if src.exists():
                src.replace(self._backup_path(i + 1))
        self.path.replace(self._backup_path(1))
        self._open()

    def emit(self, message: str, level: LogLevel) -> None:
        self._file.write(message + "\n")
        self._file.flush()
        if self.max_bytes and self._file.tell() >= self.max_bytes:
            self._rotate()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
