"""
Mock record generator for the data table.

Implements deterministic pseudo-random record generation and writes the result
as CSV (header row) or a JSON array, chosen by the output suffix.
"""

from __future__ import annotations

import csv
import json
import random
import sys
import time
from pathlib import Path

import typer

app = typer.Typer(help="Generate mock table records (CSV or JSON).")

FIELDS = ["id", "tableId", "avatar", "name", "description", "amount", "tooltip"]

_FIRST_NAMES = ["Ada", "Grace", "Alan", "Linus", "Margaret", "Ken", "Barbara", "Dennis"]
_LAST_NAMES = ["Lovelace", "Hopper", "Turing", "Torvalds", "Hamilton", "Thompson", "Liskov"]
_TOPICS = ["billing", "onboarding", "analytics", "support", "infrastructure", "research"]


def _generate_rows(rows: int, seed: int) -> list[dict[str, str | int]]:
    rng = random.Random(seed)
    generated: list[dict[str, str | int]] = []
    for i in range(1, rows + 1):
        name = f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}"
        topic = rng.choice(_TOPICS)
        amount = round(rng.uniform(10, 2_000), 2)
        generated.append(
            {
                "id": i,
                "tableId": f"TBL-{i:04d}",
                "avatar": f"https://i.pravatar.cc/150?img={rng.randint(1, 70)}",
                "name": name,
                "description": f"{name} owns the {topic} workstream.",
                "amount": f"{amount:.2f}",
                "tooltip": f"Contact {name.split()[0]} about {topic}.",
            }
        )
    return generated


def _write_rows(path: Path, records: list[dict[str, str | int]]) -> None:
    if path.suffix.lower() == ".json":
        with path.open("w", encoding="utf-8") as f:
            json.dump(records, f, indent=2)
        return

    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        writer.writeheader()
        writer.writerows(records)


@app.command()
def main(
    rows: int = typer.Option(
        12,
        "--rows",
        "-r",
        help="Number of records to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("data/records.csv"),
        "--output",
        "-o",
        help="Output path; '.json' writes a JSON array, anything else CSV.",
    ),
) -> None:
    """
    Generate mock records for previewing and exporting the table.
    """
    start = time.perf_counter()
    output.parent.mkdir(parents=True, exist_ok=True)
    typer.echo(f"Generating {rows:,} records -> {output} (seed={seed})")
    _write_rows(output, _generate_rows(rows, seed))
    typer.echo(f"Done in {time.perf_counter() - start:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
