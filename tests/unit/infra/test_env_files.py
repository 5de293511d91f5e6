from __future__ import annotations

import os

from invscroll.infra.config import load_default_env_files, load_env_file, parse_env_lines


def test_parse_env_lines_skips_comments_and_strips_quotes() -> None:
    parsed = parse_env_lines(["A=1", "B='two'", "#comment", "INVALID", "=x", 'C="three"'])
    assert parsed == {"A": "1", "B": "two", "C": "three"}


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("INVSCROLL_HOTBAR_SCOPING=hard\nC=three\n", encoding="utf-8")
    monkeypatch.setenv("C", "already")
    monkeypatch.delenv("INVSCROLL_HOTBAR_SCOPING", raising=False)
    applied = load_env_file(str(env_file))
    assert applied == {"INVSCROLL_HOTBAR_SCOPING": "hard", "C": "three"}
    assert os.environ.get("C") == "three"


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("C=three\n", encoding="utf-8")
    monkeypatch.setenv("C", "already")
    assert load_env_file(str(env_file), override_existing=False) == {}
    assert os.environ.get("C") == "already"


def test_load_env_file_missing_is_noop(tmp_path) -> None:
    assert load_env_file(str(tmp_path / ".env.missing")) == {}


def test_load_default_env_files_honors_order(tmp_path, monkeypatch) -> None:
    base = tmp_path / ".env.invscroll"
    local = tmp_path / ".env.invscroll.local"
    base.write_text("A=base\nB=base\n", encoding="utf-8")
    local.write_text("B=local\n", encoding="utf-8")
    monkeypatch.delenv("A", raising=False)
    monkeypatch.delenv("B", raising=False)

    load_default_env_files(paths=(str(base), str(local)))

    assert os.environ.get("A") == "base"
    assert os.environ.get("B") == "local"
