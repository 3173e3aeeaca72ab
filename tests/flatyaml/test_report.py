from __future__ import annotations

import io
import json
from pathlib import Path

from rich.console import Console

from flatyaml.reporting.report import dump_source, emit_document, export_json


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=120), buffer


def test_emit_document_plain_lines_are_sorted() -> None:
    console, buffer = _console()
    emit_document({"list": ["x", "y"], "a/b": "1"}, rich_table=False, console=console)
    assert buffer.getvalue().splitlines() == ["a/b=1", "list=x, y"]


def test_emit_document_rich_table_lists_paths() -> None:
    console, buffer = _console()
    emit_document({"server/port": "80", "server/hosts": ["a", "b"]}, console=console)
    output = buffer.getvalue()
    assert "server/port" in output
    assert "list[2]" in output
    assert "scalar" in output


def test_emit_document_empty() -> None:
    console, buffer = _console()
    emit_document({}, console=console)
    assert "No entries decoded." in buffer.getvalue()


def test_export_json_creates_parent_dirs(tmp_path: Path) -> None:
    target = tmp_path / "out" / "doc.json"
    export_json({"b": ["1", "2"], "a": "x"}, target)
    assert json.loads(target.read_text(encoding="utf-8")) == {"a": "x", "b": ["1", "2"]}


def test_dump_source_skips_insignificant_lines(tmp_path: Path) -> None:
    path = tmp_path / "doc.yaml"
    path.write_text("# title\n\na:\n  # note\n  b: 1\n  - item\n", encoding="utf-8")
    console, buffer = _console()

    text = dump_source(path, console=console)

    assert text == "a:\n  b: 1\n  - item"
    assert buffer.getvalue() == text + "\n"
