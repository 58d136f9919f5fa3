from __future__ import annotations

import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tablestate.config import get_settings
from tablestate.domain.columns import default_columns
from tablestate.domain.models import ConfigurationError
from tablestate.engine import TableEngine
from tablestate.infrastructure.record_source import load_records
from tablestate.infrastructure.spreadsheet import write_spreadsheet
from tablestate.reporter import print_projection
from tablestate.utils.logging import configure_logging

app = typer.Typer(help="Headless data table engine CLI.")

RECORDS_ARGUMENT = typer.Argument(..., help="Records file (.json array or .csv with header).")
SORT_OPTION = typer.Option(
    None, "--sort", "-s", help="Sort column, optionally with direction: 'amount' or 'amount:desc'."
)
PAGE_SIZE_OPTION = typer.Option(None, "--page-size", "-n", help="Rows per page.")
PAGE_OPTION = typer.Option(1, "--page", "-p", help="1-based page number (clamped to range).")
ORDER_OPTION = typer.Option(
    None, "--order", help="Comma-separated column moves 'dragged>target', e.g. 'amount>description'."
)
SELECT_OPTION = typer.Option(None, "--select", help="Comma-separated record ids to select.")


def _split(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _build_engine(
    records: Path,
    sort: Optional[str],
    page_size: Optional[int],
    page: int,
    order: Optional[str],
    select: Optional[str],
) -> TableEngine:
    engine = TableEngine(load_records(records))
    if page_size is not None:
        engine.set_page_size(page_size)

    if sort:
        column_id, _, direction = sort.partition(":")
        engine.toggle_sort(column_id)
        if direction.lower() in ("desc", "descending"):
            engine.toggle_sort(column_id)

    for move in _split(order):
        dragged, _, target = move.partition(">")
        engine.move_column(dragged.strip(), target.strip())

    for record_id in _split(select):
        if record_id.isdigit():
            engine.toggle_row(int(record_id))

    engine.set_page_index(page - 1)
    return engine


def _fail(message: str) -> NoReturn:
    Console(stderr=True).print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} log={settings.log_level} | "
        f"page_size={settings.page_size} options={settings.page_size_options} "
        f"min_width={settings.min_column_width} | "
        f"export={settings.export_filename} sheet={settings.export_sheet_name}"
    )


@app.command()
def columns() -> None:
    """
    List the stock column set and its flags.
    """
    table = Table(title="Columns")
    for header in ("id", "label", "sortable", "resizable", "pinned", "exported", "width", "min"):
        table.add_column(header)
    for column in default_columns():
        table.add_row(
            column.id,
            column.label,
            "yes" if column.sortable else "no",
            "yes" if column.resizable else "no",
            "yes" if column.pinned else "no",
            "no" if column.presentational else "yes",
            str(column.default_width),
            str(column.min_width),
        )
    Console().print(table)


@app.command()
def preview(
    records: Path = RECORDS_ARGUMENT,
    sort: Optional[str] = SORT_OPTION,
    page_size: Optional[int] = PAGE_SIZE_OPTION,
    page: int = PAGE_OPTION,
    order: Optional[str] = ORDER_OPTION,
    select: Optional[str] = SELECT_OPTION,
) -> None:
    """
    Render one page of the table in the terminal.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    try:
        engine = _build_engine(records, sort, page_size, page, order, select)
    except (ConfigurationError, ValueError, OSError) as exc:
        _fail(str(exc))
    print_projection(engine.get_projection())


@app.command()
def export(
    records: Path = RECORDS_ARGUMENT,
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Destination .xlsx or .csv (default from settings)."
    ),
    sort: Optional[str] = SORT_OPTION,
    page_size: Optional[int] = PAGE_SIZE_OPTION,
    page: int = PAGE_OPTION,
    order: Optional[str] = ORDER_OPTION,
    select: Optional[str] = SELECT_OPTION,
) -> None:
    """
    Export the visible page to a spreadsheet file.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    try:
        engine = _build_engine(records, sort, page_size, page, order, select)
        rows = engine.export_visible()
        path = write_spreadsheet(rows, output)
    except (ConfigurationError, ValueError, OSError) as exc:
        _fail(str(exc))
    pagination = engine.get_projection().pagination
    typer.echo(
        f"Exported {len(rows)} row(s) from page {pagination.page_index + 1} "
        f"of {pagination.page_count} -> {path}"
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
