"""
flatyaml package initialisation.

Exposes the public API for decoding indentation-structured ``key: value`` documents into
flat ``{path: value}`` mappings.
"""

from importlib import metadata

from flatyaml.config import DecoderOptions, InvalidConfigurationError, load_options
from flatyaml.data.sources import SourceUnavailableError
from flatyaml.decoder import Document, YamlDecoder, YamlValue


def get_version() -> str:
    """Return the installed package version, falling back to source version during development."""
    try:
        return metadata.version("flatyaml")
    except metadata.PackageNotFoundError:  # pragma: no cover - only occurs during dev
        return "0.1.0"


__all__ = [
    "DecoderOptions",
    "Document",
    "InvalidConfigurationError",
    "SourceUnavailableError",
    "YamlDecoder",
    "YamlValue",
    "get_version",
    "load_options",
]
