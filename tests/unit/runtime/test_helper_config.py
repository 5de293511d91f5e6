from __future__ import annotations

from invscroll.core.scope import HotbarScoping
from invscroll.runtime.config import (
    HelperConfig,
    get_helper_config,
    initialize_helper_config,
    load_helper_config,
    set_helper_config,
)


def test_load_helper_config_defaults() -> None:
    config = load_helper_config(env={})
    assert config == HelperConfig()
    assert config.scrolling.directional_scrolling is True
    assert config.general.hotbar_scoping is HotbarScoping.SOFT


def test_load_helper_config_parses_values() -> None:
    config = load_helper_config(
        env={
            "INVSCROLL_DIRECTIONAL_SCROLLING": "off",
            "INVSCROLL_HOTBAR_SCOPING": " hard ",
        }
    )
    assert config.scrolling.directional_scrolling is False
    assert config.general.hotbar_scoping is HotbarScoping.HARD


def test_load_helper_config_falls_back_on_bad_values() -> None:
    config = load_helper_config(
        env={
            "INVSCROLL_DIRECTIONAL_SCROLLING": "sometimes",
            "INVSCROLL_HOTBAR_SCOPING": "medium",
        }
    )
    assert config == HelperConfig()


def test_load_helper_config_reads_process_env(monkeypatch) -> None:
    monkeypatch.setenv("INVSCROLL_HOTBAR_SCOPING", "off")
    assert load_helper_config().general.hotbar_scoping is HotbarScoping.OFF


def test_set_and_get_helper_config_roundtrip() -> None:
    initialize_helper_config(env={})
    assert get_helper_config() == HelperConfig()
    custom = load_helper_config(env={"INVSCROLL_DIRECTIONAL_SCROLLING": "0"})
    assert set_helper_config(custom) is custom
    assert get_helper_config() is custom
    initialize_helper_config(env={})
