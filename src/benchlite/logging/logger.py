"""Synchronous buffered logger implementation."""

import sys
import traceback

from benchlite.logging.config import LoggerConfig, LogLevel
from benchlite.logging.handlers import BaseLogHandler
from benchlite.time import time_iso8601, time_s


class Logger:
    """A simple synchronous logger that buffers messages and pushes them to
    configured handlers when the buffer fills, the flush interval elapses or
    a message is severe enough.
    """

    def __init__(
        self,
        name: str = "",
        config: LoggerConfig = None,
        handlers: list[BaseLogHandler] | None = None,
    ):
        """Initializes a Logger with specified configuration and handlers.

        Args:
            name (str): Name of the logger. Defaults to an empty string.
            config (LoggerConfig): Configuration settings for the logger (base level, format, buffer size, etc.).
            handlers (list[BaseLogHandler], optional): A list of handler objects that inherit from BaseLogHandler.
                Defaults to an empty list if not provided.

        Raises:
            TypeError: If one of the provided handlers does not inherit from BaseLogHandler.

        """
        self._name = name

        self._config = config
        if self._config is None:
            self._config = LoggerConfig()

        self._handlers = handlers
        if self._handlers is None:
            self._handlers = []

        for handler in self._handlers:
            if not isinstance(handler, BaseLogHandler):
                raise TypeError(
                    f"Invalid handler class; expected BaseLogHandler but got {type(handler).__name__}"
                )
            handler.add_primary_config(self._config)

        self._buffer: list[str] = []
        self._buffer_start_time_s = time_s()
        self._is_running = True

    def flush(self) -> None:
        """Flushes the log message buffer to all handlers."""
        if not self._buffer:
            return

        buffer = self._buffer
        self._buffer = []
        self._buffer_start_time_s = time_s()

        for handler in self._handlers:
            try:
                handler.push(buffer)
            except Exception:
                traceback.print_exc(file=sys.stderr)

    def _process_log(self, level: LogLevel, msg: str):
        """Formats a message and buffers it, flushing when required.

        Args:
            level (LogLevel): The severity level of the message.
            msg (str): The actual log message.

        """
        try:
            log_msg = self._config.str_format % {
                "asctime": time_iso8601(),
                "name": self._name,
                "levelname": level.name,
                "message": msg,
            }
        except (KeyError, TypeError, ValueError):
            traceback.print_exc(file=sys.stderr)
            return

        if not self._buffer:
            self._buffer_start_time_s = time_s()
        self._buffer.append(log_msg)

        if (
            level >= LogLevel.WARNING
            or len(self._buffer) >= self._config.buffer_size
            or (time_s() - self._buffer_start_time_s) >= self._config.flush_interval_s
        ):
            self.flush()

    def set_log_level(self, level: LogLevel) -> None:
        """Modify the logger's base log level at runtime.

        Args:
            level (LogLevel): The new base log level.

        """
        self.debug(f"Changing base log level from {self._config.base_level} to {level}")
        self._config.base_level = level
        for handler in self._handlers:
            handler.add_primary_config(self._config)

    def trace(self, msg: str) -> None:
        """Send a trace-level log message."""
        if self._is_running and self._config.base_level <= LogLevel.TRACE:
            self._process_log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        """Send a debug-level log message."""
        if self._is_running and self._config.base_level <= LogLevel.DEBUG:
            self._process_log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        """Send an info-level log message."""
        if self._is_running and self._config.base_level <= LogLevel.INFO:
            self._process_log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        """Send a warning-level log message."""
        if self._is_running and self._config.base_level <= LogLevel.WARNING:
            self._process_log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        """Send an error-level log message."""
        if self._is_running and self._config.base_level <= LogLevel.ERROR:
            self._process_log(LogLevel.ERROR, msg)

    def shutdown(self) -> None:
        """Flushes remaining messages and closes all handlers.

        Messages logged after shutdown are dropped.
        """
        self.flush()
        self._is_running = False
        for handler in self._handlers:
            handler.close()

    def is_running(self) -> bool:
        """Check if the logger is running."""
        return self._is_running

    def get_name(self) -> str:
        """Get the name of the logger."""
        return self._name

    def get_config(self) -> LoggerConfig:
        """Get the configuration of the logger."""
        return self._config
