"""Logging pipeline implementation."""

from __future__ import annotations

import logging
import os
import queue
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from invscroll.api.logging import JsonFormatter, LoggingConfig

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_listener: QueueListener | None = None


def configure_logging(config: LoggingConfig) -> None:
    """Replace root handlers; the optional run file is written off-thread."""
    global _listener

    shutdown_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    console = logging.StreamHandler()
    console.setFormatter(_resolve_formatter(config.console_format))
    if not config.file_path:
        root.addHandler(console)
        return

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _listener = QueueListener(
        records,
        console,
        _file_handler(Path(config.file_path), config.file_format),
        respect_handler_level=True,
    )
    _listener.start()


def shutdown_logging() -> None:
    """Stop the run-file listener, flushing records still queued."""
    global _listener

    if _listener is None:
        return
    _listener.stop()
    for handler in _listener.handlers:
        handler.close()
    _listener = None


def setup_default_logging() -> None:
    """Configure console logging if no handlers are present."""
    if logging.getLogger().handlers:
        return
    configure_logging(LoggingConfig(level_name=resolve_log_level_name(default="INFO")))


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("INVSCROLL_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def _file_handler(path: Path, kind: str) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(_resolve_formatter(kind))
    return handler


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)
