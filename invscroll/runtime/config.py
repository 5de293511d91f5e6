"""Centralized helper configuration ownership."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Mapping

from invscroll.core.scope import HotbarScoping


@dataclass(frozen=True, slots=True)
class ScrollingConfig:
    directional_scrolling: bool = True


@dataclass(frozen=True, slots=True)
class GeneralConfig:
    hotbar_scoping: HotbarScoping = HotbarScoping.SOFT


@dataclass(frozen=True, slots=True)
class HelperConfig:
    scrolling: ScrollingConfig = field(default_factory=ScrollingConfig)
    general: GeneralConfig = field(default_factory=GeneralConfig)


_HELPER_CONFIG: ContextVar[HelperConfig | None] = ContextVar("invscroll_helper_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _hotbar_scoping(
    name: str, default: HotbarScoping, *, env: Mapping[str, str] | None = None
) -> HotbarScoping:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    try:
        return HotbarScoping(raw.strip().upper())
    except ValueError:
        return default


def load_helper_config(*, env: Mapping[str, str] | None = None) -> HelperConfig:
    defaults = HelperConfig()
    return HelperConfig(
        scrolling=ScrollingConfig(
            directional_scrolling=_flag(
                "INVSCROLL_DIRECTIONAL_SCROLLING",
                defaults.scrolling.directional_scrolling,
                env=env,
            ),
        ),
        general=GeneralConfig(
            hotbar_scoping=_hotbar_scoping(
                "INVSCROLL_HOTBAR_SCOPING", defaults.general.hotbar_scoping, env=env
            ),
        ),
    )


def initialize_helper_config(*, env: Mapping[str, str] | None = None) -> HelperConfig:
    config = load_helper_config(env=env)
    _HELPER_CONFIG.set(config)
    return config


def set_helper_config(config: HelperConfig) -> HelperConfig:
    _HELPER_CONFIG.set(config)
    return config


def get_helper_config() -> HelperConfig:
    config = _HELPER_CONFIG.get()
    if config is not None:
        return config
    return initialize_helper_config()


__all__ = [
    "GeneralConfig",
    "HelperConfig",
    "ScrollingConfig",
    "get_helper_config",
    "initialize_helper_config",
    "load_helper_config",
    "set_helper_config",
]
