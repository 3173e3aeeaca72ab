"""Decoder options and helpers for loading them."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

LOG = logging.getLogger(__name__)

DEFAULT_INDENT_SIZE = 2
DEFAULT_DELIMITER = "/"
DEFAULT_ENCODING = "utf-8"
ENCODING_ENV = "FLATYAML_ENCODING"


class InvalidConfigurationError(ValueError):
    """Raised when decoder options fail validation."""


class DecoderOptions(BaseModel):
    """Settings fixed for the lifetime of a decoder."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent_size: int = Field(
        default=DEFAULT_INDENT_SIZE, ge=2, description="Width of one indentation unit in spaces."
    )
    delimiter: str = Field(
        default=DEFAULT_DELIMITER, min_length=1, description="Separator between path segments."
    )
    encoding: str = Field(
        default=DEFAULT_ENCODING, min_length=1, description="Character encoding of byte sources."
    )

    @property
    def indent_unit(self) -> str:
        return " " * self.indent_size


def build_options(**values: Any) -> DecoderOptions:
    """Validate raw option values, surfacing failures as ``InvalidConfigurationError``."""
    try:
        return DecoderOptions(**values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise InvalidConfigurationError(f"Invalid decoder options: {problems}") from exc


def load_options(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> DecoderOptions:
    """
    Build DecoderOptions from defaults, an optional options file and keyword overrides.

    The options file is itself a flat document (``indent_size: 4``) decoded with default
    settings. Later sources win: environment, then file, then overrides. ``None`` overrides
    are ignored so CLI flags that were not given leave earlier values in place.
    """
    merged: Dict[str, Any] = DecoderOptions().model_dump()

    env_encoding = os.environ.get(ENCODING_ENV)
    if env_encoding:
        merged["encoding"] = env_encoding

    if config_path:
        merged.update(_read_options_file(Path(config_path)))

    if overrides:
        for key, value in overrides.items():
            if value is None:
                continue
            merged[key] = value

    return build_options(**merged)


def _read_options_file(path: Path) -> Dict[str, Any]:
    # Imported here because the decoder itself depends on this module.
    from flatyaml.decoder import YamlDecoder

    document = YamlDecoder().decode_source(path)
    known = set(DecoderOptions.model_fields)
    values: Dict[str, Any] = {}
    for key, value in document.items():
        if key not in known:
            LOG.warning("Ignoring unknown option '%s' in %s", key, path)
            continue
        if isinstance(value, list):
            raise InvalidConfigurationError(f"Option '{key}' in {path} must be a scalar")
        values[key] = value
    return values
