"""Host-level logging policy over the runtime logging pipeline."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from invscroll.api.logging import JsonFormatter, LoggingConfig, configure_logging
from invscroll.runtime.logging import resolve_log_level_name

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]


def build_logging_config() -> LoggingConfig:
    """Build logging config from environment."""
    return LoggingConfig(
        level_name=resolve_log_level_name(default="INFO"),
        console_format=os.getenv("LOG_FORMAT", "text").strip().lower() or "text",
        file_path=_resolve_run_log_file_path(),
        file_format="json",
    )


def setup_logging() -> None:
    """Configure logging from environment."""
    config = build_logging_config()
    configure_logging(config)
    if config.file_path is not None:
        logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str | None:
    configured = os.getenv("INVSCROLL_LOG_DIR", "").strip()
    if not configured:
        return None
    base_dir = Path(configured)
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"invscroll_run_{stamp}.jsonl")
