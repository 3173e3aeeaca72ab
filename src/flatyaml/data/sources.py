"""Line sources feeding the decoder: files, byte streams and text streams."""

from __future__ import annotations

import codecs
import io
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO, Union

from flatyaml.config import DEFAULT_ENCODING
from flatyaml.parsing.classify import is_insignificant

LOG = logging.getLogger(__name__)

Source = Union[str, Path, IO[str], IO[bytes]]


class SourceUnavailableError(OSError):
    """Raised when a line source cannot be opened, read or decoded."""

    def __init__(self, source: object, reason: str) -> None:
        self.source = source
        super().__init__(f"Cannot read {describe_source(source)}: {reason}")


def describe_source(source: object) -> str:
    if isinstance(source, (str, Path)):
        return f"'{source}'"
    name = getattr(source, "name", None)
    if isinstance(name, str):
        return f"stream '{name}'"
    return f"stream {type(source).__name__}"


def strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


def iter_lines(source: Source, encoding: str = DEFAULT_ENCODING) -> Iterator[str]:
    """
    Yield the lines of ``source`` without line terminators.

    Paths are opened and closed here. Streams are read as-is and left open for the caller;
    binary streams are decoded with ``encoding``.
    """
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise SourceUnavailableError(source, f"unknown encoding '{encoding}'") from exc

    try:
        if isinstance(source, (str, Path)):
            LOG.debug("Reading %s as %s", source, encoding)
            with open(source, encoding=encoding, newline="") as handle:
                for line in handle:
                    yield strip_terminator(line)
        elif _is_binary(source):
            yield from _iter_binary_lines(source, encoding)
        else:
            for line in source:
                yield strip_terminator(line)
    except (OSError, ValueError) as exc:
        # ValueError covers UnicodeDecodeError and reads from closed streams.
        raise SourceUnavailableError(source, str(exc)) from exc


def _is_binary(stream: IO[str] | IO[bytes]) -> bool:
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    read = getattr(stream, "read", None)
    return read is not None and isinstance(read(0), bytes)


def _iter_binary_lines(stream: IO[bytes], encoding: str) -> Iterator[str]:
    """Decode a byte stream with the same line boundaries ``open(..., newline="")`` uses."""
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        buffer = stream
    else:
        buffer = io.BytesIO(stream.read())
    wrapper = io.TextIOWrapper(buffer, encoding=encoding, newline="")
    try:
        for line in wrapper:
            yield strip_terminator(line)
    finally:
        # Leaves the caller's stream open.
        wrapper.detach()


def significant_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines that are neither blank nor comments, unchanged."""
    for line in lines:
        if not is_insignificant(line):
            yield line
