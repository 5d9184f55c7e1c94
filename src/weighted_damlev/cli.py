from __future__ import annotations

"""CLI entrypoint for weighted-damlev."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .batch import load_pairs, pairwise_distances, score_pairs, write_results
from .batch import reports
from .config import DistanceOptions, Weight, resolve_options
from .core.engine import osa_distance

app = typer.Typer(help="Weighted Damerau-Levenshtein (optimal string alignment) distances.")
console = Console()

SWAP_OPTION = typer.Option(None, "--swap", "-w", help="Cost of swapping two adjacent symbols.")
SUBSTITUTE_OPTION = typer.Option(None, "--substitute", "-s", help="Cost of a substitution.")
INSERT_OPTION = typer.Option(None, "--insert", "-a", help="Cost of an insertion.")
DELETE_OPTION = typer.Option(None, "--delete", "-d", help="Cost of a deletion.")
WEIGHTS_FILE_OPTION = typer.Option(
    None, "--weights-file", help="YAML profile with swap/substitute/insert/delete."
)
PROFILE_OPTION = typer.Option(
    None, "--profile", "-p", help="Named weight profile from the profiles directory."
)
VARIANT_OPTION = typer.Option(
    None,
    "--index-aligned/--canonical",
    help="Same-index substitution test (historical values) or the canonical one.",
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _weight(value: Optional[float]) -> Optional[Weight]:
    if value is not None and float(value).is_integer():
        return int(value)
    return value


def _options(
    swap: Optional[float],
    substitute: Optional[float],
    insert: Optional[float],
    delete: Optional[float],
    weights_file: Optional[Path],
    profile: Optional[str],
    index_aligned: Optional[bool],
) -> DistanceOptions:
    try:
        return resolve_options(
            weights_file=weights_file,
            profile=profile,
            overrides={
                "swap": _weight(swap),
                "substitute": _weight(substitute),
                "insert": _weight(insert),
                "delete": _weight(delete),
            },
            index_aligned=index_aligned,
        )
    except (ValueError, FileNotFoundError) as exc:
        console.print(f"[red]Invalid weights[/red]: {exc}")
        raise typer.Exit(code=1)


@app.command()
def distance(
    source: str = typer.Argument(..., help="Sequence to transform."),
    target: str = typer.Argument(..., help="Sequence to reach."),
    swap: Optional[float] = SWAP_OPTION,
    substitute: Optional[float] = SUBSTITUTE_OPTION,
    insert: Optional[float] = INSERT_OPTION,
    delete: Optional[float] = DELETE_OPTION,
    weights_file: Optional[Path] = WEIGHTS_FILE_OPTION,
    profile: Optional[str] = PROFILE_OPTION,
    index_aligned: Optional[bool] = VARIANT_OPTION,
) -> None:
    options = _options(
        swap, substitute, insert, delete, weights_file, profile, index_aligned
    )
    value = osa_distance(
        source, target, options.weights, index_aligned=options.index_aligned
    )
    console.print(str(value))


@app.command()
def batch(
    pairs_path: Path = typer.Argument(..., help="JSONL file of {source, target} rows."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write per-pair results as JSONL."
    ),
    summary_path: Optional[Path] = typer.Option(
        None, "--summary", help="Write a JSON summary with every record."
    ),
    swap: Optional[float] = SWAP_OPTION,
    substitute: Optional[float] = SUBSTITUTE_OPTION,
    insert: Optional[float] = INSERT_OPTION,
    delete: Optional[float] = DELETE_OPTION,
    weights_file: Optional[Path] = WEIGHTS_FILE_OPTION,
    profile: Optional[str] = PROFILE_OPTION,
    index_aligned: Optional[bool] = VARIANT_OPTION,
) -> None:
    options = _options(
        swap, substitute, insert, delete, weights_file, profile, index_aligned
    )
    try:
        pairs = load_pairs(pairs_path)
    except (ValueError, FileNotFoundError) as exc:
        console.print(f"[red]Cannot read pairs[/red]: {exc}")
        raise typer.Exit(code=1)

    records = score_pairs(pairs, options)
    if output is not None:
        write_results(output, records)
    if summary_path is not None:
        reports.write_summary(summary_path, records)

    table = Table(title="Batch Summary")
    table.add_column("metric")
    table.add_column("value", justify="right")
    for key, value in reports.summarise(records).items():
        table.add_row(key, f"{value:.3f}" if isinstance(value, float) else str(value))
    console.print(table)
    if output is not None:
        console.print(f"Results written to [green]{output}[/green]")


@app.command()
def matrix(
    words: List[str] = typer.Argument(..., help="Sequences compared with each other."),
    swap: Optional[float] = SWAP_OPTION,
    substitute: Optional[float] = SUBSTITUTE_OPTION,
    insert: Optional[float] = INSERT_OPTION,
    delete: Optional[float] = DELETE_OPTION,
    weights_file: Optional[Path] = WEIGHTS_FILE_OPTION,
    profile: Optional[str] = PROFILE_OPTION,
    index_aligned: Optional[bool] = VARIANT_OPTION,
) -> None:
    options = _options(
        swap, substitute, insert, delete, weights_file, profile, index_aligned
    )
    values = pairwise_distances(
        words, weights=options.weights, index_aligned=options.index_aligned
    )

    table = Table(title="Pairwise Distances")
    table.add_column("source \\ target")
    for word in words:
        table.add_column(word, justify="right")
    for word, row in zip(words, values.tolist()):
        table.add_row(word, *(str(cell) for cell in row))
    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
