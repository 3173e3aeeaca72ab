from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from flatyaml.config import (
    ENCODING_ENV,
    DecoderOptions,
    InvalidConfigurationError,
    build_options,
    load_options,
)
from flatyaml.data.sources import SourceUnavailableError


def test_default_options() -> None:
    options = DecoderOptions()
    assert options.indent_size == 2
    assert options.delimiter == "/"
    assert options.encoding == "utf-8"
    assert options.indent_unit == "  "


def test_options_are_immutable() -> None:
    options = DecoderOptions()
    with pytest.raises(ValidationError):
        options.indent_size = 4  # type: ignore[misc]


def test_build_options_reports_invalid_fields() -> None:
    with pytest.raises(InvalidConfigurationError) as excinfo:
        build_options(indent_size=1, delimiter="")
    message = str(excinfo.value)
    assert "indent_size" in message
    assert "delimiter" in message


def test_load_options_from_file_and_overrides(tmp_path: Path) -> None:
    config_path = tmp_path / "options.yaml"
    config_path.write_text("# decoder settings\nindent_size: 4\ndelimiter: .\n", encoding="utf-8")

    options = load_options(config_path=config_path, overrides={"delimiter": "|", "encoding": None})

    assert options.indent_size == 4
    assert options.delimiter == "|"
    assert options.encoding == "utf-8"


def test_load_options_ignores_unknown_keys(tmp_path: Path) -> None:
    config_path = tmp_path / "options.yaml"
    config_path.write_text("colour: blue\nindent_size: 3\n", encoding="utf-8")
    assert load_options(config_path=config_path).indent_size == 3


def test_load_options_rejects_sequence_values(tmp_path: Path) -> None:
    config_path = tmp_path / "options.yaml"
    config_path.write_text("delimiter:\n  - a\n  - b\n", encoding="utf-8")
    with pytest.raises(InvalidConfigurationError):
        load_options(config_path=config_path)


def test_load_options_rejects_invalid_values(tmp_path: Path) -> None:
    config_path = tmp_path / "options.yaml"
    config_path.write_text("indent_size: one\n", encoding="utf-8")
    with pytest.raises(InvalidConfigurationError):
        load_options(config_path=config_path)


def test_load_options_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailableError):
        load_options(config_path=tmp_path / "absent.yaml")


def test_encoding_environment_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENCODING_ENV, "latin-1")
    assert load_options().encoding == "latin-1"
    assert load_options(overrides={"encoding": "utf-16"}).encoding == "utf-16"
