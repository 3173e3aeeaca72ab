"""Decoding of indentation-structured documents into flat path mappings."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable

from flatyaml.config import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_INDENT_SIZE,
    DecoderOptions,
    build_options,
)
from flatyaml.data.sources import Source, iter_lines, strip_terminator
from flatyaml.parsing.classify import KeyLine, SequenceItem, classify_line
from flatyaml.parsing.paths import PathTracker

LOG = logging.getLogger(__name__)

YamlValue = str | list[str]
Document = dict[str, YamlValue]


class YamlDecoder:
    """
    Flattens ``key: value`` / ``- item`` documents into ``{path: value}`` mappings.

    Nesting is expressed through leading whitespace and becomes a delimiter-joined path
    (``a:`` followed by ``  b: 1`` yields ``{"a/b": "1"}``). Consecutive item lines are
    gathered into one list stored under the path of the key line that precedes them.

    Options are validated on construction and never change afterwards. Every ``decode``
    call works on its own path state, so a single instance can be reused freely.
    """

    def __init__(
        self,
        indent_size: int = DEFAULT_INDENT_SIZE,
        delimiter: str = DEFAULT_DELIMITER,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self.options = build_options(
            indent_size=indent_size, delimiter=delimiter, encoding=encoding
        )

    @classmethod
    def from_options(cls, options: DecoderOptions) -> "YamlDecoder":
        return cls(
            indent_size=options.indent_size,
            delimiter=options.delimiter,
            encoding=options.encoding,
        )

    def decode(self, lines: Iterable[str]) -> Document:
        """
        Decode a sequence of text lines.

        Malformed lines never raise; failures of the line source itself propagate.
        """
        indent_unit = self.options.indent_unit
        tracker = PathTracker(self.options.delimiter)
        document: Document = {}
        pending: list[str] | None = None
        current_path = ""
        line_count = 0

        try:
            for raw_line in lines:
                line_count += 1
                kind = classify_line(strip_terminator(raw_line), indent_unit)

                if isinstance(kind, SequenceItem):
                    if pending is None:
                        pending = []
                    pending.append(kind.value)
                elif isinstance(kind, KeyLine):
                    if pending:
                        document[current_path] = list(pending)
                    pending = None

                    current_path = tracker.create_key_path(kind.depth, kind.raw_prefix)
                    if kind.inline_value is not None:
                        document[current_path] = kind.inline_value

            if pending:
                document[current_path] = list(pending)
        finally:
            tracker.clear()

        LOG.debug("Decoded %d entries from %d lines", len(document), line_count)
        return document

    def decode_or_empty(self, lines: Iterable[str]) -> Document:
        """Like ``decode`` but any failure yields an empty mapping."""
        try:
            return self.decode(lines)
        except Exception as exc:  # noqa: BLE001
            LOG.warning("Decoding failed, returning empty document: %s", exc)
            return {}

    def decode_text(self, text: str) -> Document:
        return self.decode(io.StringIO(text, newline=""))

    def decode_source(self, source: Source) -> Document:
        """Decode a file path or stream using the configured encoding."""
        return self.decode(iter_lines(source, self.options.encoding))

    def decode_source_or_empty(self, source: Source) -> Document:
        return self.decode_or_empty(iter_lines(source, self.options.encoding))
