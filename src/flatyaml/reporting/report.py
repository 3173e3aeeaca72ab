"""Result presentation utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from flatyaml.config import DEFAULT_ENCODING
from flatyaml.data.sources import Source, iter_lines, significant_lines
from flatyaml.decoder import Document, YamlValue

LOG = logging.getLogger(__name__)


def emit_document(
    document: Document,
    rich_table: bool = True,
    console: Console | None = None,
) -> None:
    """Print a decoded document either as a rich table or as ``path=value`` lines."""
    console = console or Console()
    if not document:
        console.print(Text("No entries decoded.", style="yellow"))
        return

    if rich_table:
        _render_rich_table(document, console)
    else:
        _render_plain(document, console)


def _render_rich_table(document: Document, console: Console) -> None:
    table = Table(title=f"{len(document)} entries", title_style="bold cyan")
    table.add_column("Path", style="cyan", no_wrap=True)
    table.add_column("Kind", style="magenta")
    table.add_column("Value")
    for path in sorted(document):
        value = document[path]
        if isinstance(value, list):
            table.add_row(Text(path or "(root)"), Text(f"list[{len(value)}]"), Text("\n".join(value)))
        else:
            table.add_row(Text(path or "(root)"), Text("scalar"), Text(value))
    console.print(table)


def _render_plain(document: Document, console: Console) -> None:
    for path in sorted(document):
        console.print(
            f"{path}={_format_value(document[path])}",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )


def _format_value(value: YamlValue) -> str:
    if isinstance(value, list):
        return ", ".join(value)
    return value


def export_json(document: Document, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(document, handle, indent=2, sort_keys=True, ensure_ascii=False)
    LOG.info("JSON exported to %s", path)


def dump_source(
    source: Source,
    encoding: str = DEFAULT_ENCODING,
    console: Console | None = None,
) -> str:
    """
    Print the significant lines of a source and return the printed text.

    Blank and comment lines are dropped; all other lines are echoed unchanged, indentation
    included.
    """
    console = console or Console()
    text = "\n".join(significant_lines(iter_lines(source, encoding)))
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)
    return text
