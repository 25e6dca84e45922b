"""Lightweight leveled logger used across robofont."""
from .levels import LogLevel
from .handlers import Handler, ConsoleHandler, FileHandler
from .logger import Logger, get_logger, set_global_level
from .formats import LogFormat

__all__ = [
    "Logger",
    "LogLevel",
    "Handler",
    "ConsoleHandler",
    "FileHandler",
    "LogFormat",
    "get_logger",
    "set_global_level",
]
