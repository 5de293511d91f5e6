"""Env file loading for helper configuration."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path

DEFAULT_ENV_FILES: tuple[str, ...] = (".env.invscroll", ".env.invscroll.local")


def parse_env_lines(lines: Iterable[str]) -> dict[str, str]:
    """Parse KEY=VALUE lines. Blank, comment and malformed lines are skipped."""
    values: dict[str, str] = {}
    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()
        if not key:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        values[key] = value
    return values


def load_env_file(path: str, *, override_existing: bool = True) -> dict[str, str]:
    """Apply one env file to the process environment and return the applied pairs."""
    env_path = Path(path)
    if not env_path.is_file():
        return {}
    parsed = parse_env_lines(env_path.read_text(encoding="utf-8").splitlines())
    applied: dict[str, str] = {}
    for key, value in parsed.items():
        if override_existing or key not in os.environ:
            os.environ[key] = value
            applied[key] = value
    return applied


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files left to right; later files win."""
    for path in DEFAULT_ENV_FILES if paths is None else paths:
        load_env_file(path, override_existing=override_existing)
