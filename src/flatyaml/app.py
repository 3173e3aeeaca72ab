"""Command-line entry point for flatyaml."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from flatyaml import get_version
from flatyaml.config import InvalidConfigurationError, load_options
from flatyaml.data.sources import SourceUnavailableError
from flatyaml.decoder import YamlDecoder
from flatyaml.reporting.report import dump_source, emit_document, export_json

app = typer.Typer(help="flatyaml: flatten indentation-structured documents into path/value pairs.")

LOG = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )


@app.command()
def decode(
    source: Path = typer.Argument(..., help="Document to decode."),
    indent_size: int | None = typer.Option(
        None,
        "--indent-size",
        "-i",
        help="Width of one indentation unit in spaces (>= 2).",
    ),
    delimiter: str | None = typer.Option(
        None,
        "--delimiter",
        "-d",
        help="Separator placed between path segments.",
    ),
    encoding: str | None = typer.Option(
        None,
        "--encoding",
        "-e",
        help="Character encoding of the document.",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Optional options file (indent_size, delimiter, encoding) applied before CLI flags.",
    ),
    plain: bool = typer.Option(False, "--plain", help="Print path=value lines instead of a table."),
    export_json_path: Path | None = typer.Option(
        None,
        "--export-json",
        help="Optional JSON export path.",
    ),
    or_empty: bool = typer.Option(
        False,
        "--or-empty",
        help="Treat an unreadable document as empty instead of failing.",
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, ...)."),
) -> None:
    """Decode a document into a flat path/value mapping."""
    _configure_logging(log_level)

    overrides = {
        "indent_size": indent_size,
        "delimiter": delimiter,
        "encoding": encoding,
    }
    try:
        options = load_options(config_path=config_file, overrides=overrides)
    except InvalidConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except SourceUnavailableError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc

    decoder = YamlDecoder.from_options(options)
    LOG.info("Decoding %s", source)
    if or_empty:
        document = decoder.decode_source_or_empty(source)
    else:
        try:
            document = decoder.decode_source(source)
        except SourceUnavailableError as exc:
            typer.secho(str(exc), fg=typer.colors.RED)
            raise typer.Exit(code=1) from exc

    emit_document(document, rich_table=not plain)
    if export_json_path:
        export_json(document, export_json_path)


@app.command()
def dump(
    source: Path = typer.Argument(..., help="Document to print."),
    encoding: str | None = typer.Option(
        None,
        "--encoding",
        "-e",
        help="Character encoding of the document.",
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, ...)."),
) -> None:
    """Print a document without its blank and comment lines."""
    _configure_logging(log_level)
    try:
        options = load_options(overrides={"encoding": encoding})
    except InvalidConfigurationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--encoding") from exc

    try:
        dump_source(source, options.encoding)
    except SourceUnavailableError as exc:
        LOG.error("Dump failed: %s", exc)
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc


@app.command()
def version() -> None:
    """Print the installed flatyaml version."""
    typer.echo(get_version())


if __name__ == "__main__":  # pragma: no cover
    app()
