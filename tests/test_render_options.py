"""Tests for render option normalization and loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsonexplain import RenderOptions, load_options
from jsonexplain.config import coerce_options
from jsonexplain.exceptions import ConfigError


def test_defaults() -> None:
    assert RenderOptions().format_path is True
    assert coerce_options(None) == RenderOptions()


@pytest.mark.parametrize("key", ["formatPath", "format_path"])
def test_mapping_aliases(key: str) -> None:
    assert RenderOptions.from_mapping({key: False}) == RenderOptions(format_path=False)


def test_options_instance_passes_through() -> None:
    options = RenderOptions(format_path=False)
    assert coerce_options(options) is options


def test_unknown_key_suggests_close_match() -> None:
    with pytest.raises(ConfigError, match="did you mean `format_path`"):
        RenderOptions.from_mapping({"format_paths": True})


def test_unknown_key_without_suggestion() -> None:
    with pytest.raises(ConfigError, match=r"unknown render option `verbose`$"):
        RenderOptions.from_mapping({"verbose": True})


def test_non_boolean_rejected() -> None:
    with pytest.raises(ConfigError, match="must be a boolean"):
        RenderOptions.from_mapping({"formatPath": "no"})


def test_duplicate_alias_rejected() -> None:
    with pytest.raises(ConfigError, match="more than once"):
        RenderOptions.from_mapping({"formatPath": False, "format_path": True})


def test_non_mapping_options_rejected() -> None:
    with pytest.raises(ConfigError, match="must be a mapping"):
        coerce_options(["formatPath"])  # type: ignore[arg-type]


def test_load_options_from_fixture(fixtures_root: Path) -> None:
    assert load_options(fixtures_root / "options.yaml") == RenderOptions(format_path=False)


def test_load_options_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "options.yaml"
    path.write_text("", encoding="utf-8")
    assert load_options(path) == RenderOptions()


def test_load_options_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_options(tmp_path / "absent.yaml")


def test_load_options_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "options.yaml"
    path.write_text("formatPath: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_options(path)


def test_load_options_requires_mapping(tmp_path: Path) -> None:
    path = tmp_path / "options.yaml"
    path.write_text("- formatPath\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        load_options(path)
