from __future__ import annotations

import io

from rich.console import Console

from tablestate.engine import TableEngine
from tablestate.reporter import print_projection


def _render(engine: TableEngine) -> str:
    console = Console(record=True, width=200, file=io.StringIO())
    print_projection(engine.get_projection(), console=console)
    return console.export_text()


def test_caption_reports_range_and_page(engine: TableEngine) -> None:
    engine.next_page()

    output = _render(engine)

    assert "Showing 6 to 10 of 12 entries" in output
    assert "Page 2 of 3" in output
    assert "No rows selected" in output


def test_amounts_use_currency_format(engine: TableEngine) -> None:
    output = _render(engine)

    assert "$1,200.00" in output
    assert "Margaret" in output


def test_sort_marker_and_selection_markers(engine: TableEngine) -> None:
    engine.toggle_sort("amount")
    engine.toggle_row(11)

    output = _render(engine)

    assert "Amount ▲" in output
    assert "[-]" in output
    assert "[x]" in output
    assert "1 of 12 row(s) selected" in output


def test_empty_table_shows_placeholder(columns) -> None:
    output = _render(TableEngine([], columns=columns))

    assert "No results found." in output
    assert "Showing 0 to 0 of 0 entries" in output
