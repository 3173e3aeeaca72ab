"""Line classification and indentation depth helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

COMMENT_PREFIX = "#"
KEY_SEPARATOR = ":"
ITEM_MARKER = "-"

# Control characters and the ASCII space; other Unicode whitespace such as NBSP is content.
TRIM_CHARS = "".join(chr(code) for code in range(0x21))


@dataclass(frozen=True)
class Skip:
    """Blank or comment line."""


@dataclass(frozen=True)
class SequenceItem:
    """A ``- item`` line contributing one entry to the pending sequence."""

    value: str


@dataclass(frozen=True)
class KeyLine:
    """A ``key:`` or ``key: value`` line."""

    raw_prefix: str
    inline_value: str | None
    depth: int

    @property
    def key(self) -> str:
        return trim(self.raw_prefix)


LineKind = Skip | SequenceItem | KeyLine

SKIP = Skip()


def trim(text: str) -> str:
    """Strip leading and trailing characters up to and including the ASCII space."""
    return text.strip(TRIM_CHARS)


def split_fields(text: str, separator: str) -> list[str]:
    """
    Split ``text`` on ``separator`` and drop trailing empty fields.

    An empty ``text`` yields a single empty field, while text made only of separators
    yields no fields at all.
    """
    if not text:
        return [""]
    fields = text.split(separator)
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def is_insignificant(line: str) -> bool:
    stripped = trim(line)
    return not stripped or stripped.startswith(COMMENT_PREFIX)


def compute_depth(prefix: str, indent_unit: str) -> int:
    """
    Return the nesting depth for a key prefix.

    The depth is derived from the position of the last occurrence of the indentation unit,
    not from a count of units: ``floor(prefix.rfind(unit) * 0.5) + 1``. A prefix without
    the unit sits at depth 0.
    """
    position = prefix.rfind(indent_unit)
    return math.floor(position * 0.5) + 1


def classify_line(line: str, indent_unit: str) -> LineKind:
    """Tag one raw line as skipped, a sequence item or a key line."""
    if is_insignificant(line):
        return SKIP

    fields = split_fields(line, KEY_SEPARATOR)
    prefix = fields[0] if fields else ""

    if trim(prefix).startswith(ITEM_MARKER):
        parts = split_fields(line, ITEM_MARKER)
        return SequenceItem(value=trim(parts[1]) if len(parts) == 2 else "")

    inline_value = None
    if len(fields) > 1:
        inline_value = trim(fields[1]).replace('"', "")
    return KeyLine(
        raw_prefix=prefix,
        inline_value=inline_value,
        depth=compute_depth(prefix, indent_unit),
    )
