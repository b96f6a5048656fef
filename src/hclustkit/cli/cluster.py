"""
Cluster command for building and cutting dendrograms.

Provides subcommands:
- build: Build a dendrogram from a labelled distance matrix file
- cut: Assign observations to flat clusters
"""
from __future__ import annotations

from pathlib import Path

import polars as pl
import typer
from rich.console import Console
from rich.table import Table

from hclustkit.cli.utils import QuietConsole, configure_logging, spinner_progress
from hclustkit.core.exceptions import HclustError
from hclustkit.models.config import LinkageMethod
from hclustkit.models.dendrogram import Dendrogram

app = typer.Typer(
    name="cluster",
    help="Build and cut hierarchical clustering trees",
    no_args_is_help=True,
)

console = Console()


def _load_and_cluster(
    matrix: Path,
    method: LinkageMethod,
    out: QuietConsole,
    quiet: bool,
) -> Dendrogram:
    from hclustkit.core.hclust import hclust
    from hclustkit.core.parsers import DistanceMatrixParser

    out.print(f"[bold]Distance matrix:[/bold] {matrix}")
    out.print(f"[bold]Method:[/bold] {method.value}")

    try:
        distances = DistanceMatrixParser(matrix).to_distance_matrix()
        with spinner_progress(
            f"Clustering {len(distances)} observations...",
            console,
            quiet,
        ):
            return hclust(distances, method)
    except HclustError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        if e.suggestion:
            console.print(f"[yellow]Suggestion: {e.suggestion}[/yellow]")
        raise typer.Exit(code=1) from None
    except ValueError as e:
        console.print(f"[red]Error loading distance matrix: {e}[/red]")
        raise typer.Exit(code=1) from None


def _merge_table(tree: Dendrogram, limit: int) -> Table:
    table = Table(title=f"{tree.method.value} linkage")
    table.add_column("Step", justify="right")
    table.add_column("Left", justify="right")
    table.add_column("Right", justify="right")
    table.add_column("Height", justify="right")
    for step, merge in enumerate(tree.steps[:limit], start=1):
        table.add_row(str(step), str(merge.left), str(merge.right), f"{merge.height:.6g}")
    return table


@app.command(name="build")
def build(
    matrix: Path = typer.Option(
        ...,
        "--matrix",
        "-d",
        help="Distance matrix CSV/TSV (first column and header row hold labels)",
        exists=True,
        dir_okay=False,
    ),
    method: LinkageMethod = typer.Option(
        LinkageMethod.SINGLE,
        "--method",
        "-m",
        help="Linkage method: single, complete, average, ward1 or ward2",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the merge table (step,left,right,height) to this CSV file",
    ),
    show: int = typer.Option(
        20,
        "--show",
        help="Number of merge steps to print",
        min=0,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress progress output",
    ),
) -> None:
    """
    Build a dendrogram from a distance matrix.

    Examples:

        # Average linkage, print the first merges
        hclustkit cluster build --matrix distances.csv --method average

        # Ward (squared distances), write the merge table
        hclustkit cluster build -d distances.csv -m ward2 -o merges.csv
    """
    configure_logging(console, verbose)
    out = QuietConsole(console, quiet=quiet)

    out.print("\n[bold blue]hclustkit Dendrogram Builder[/bold blue]\n")
    tree = _load_and_cluster(matrix, method, out, quiet)

    if show > 0:
        out.print(_merge_table(tree, show))
    out.print(
        "[bold]Leaf order:[/bold] "
        + ", ".join(str(label) for label in tree.ordered_labels())
    )

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        tree.to_polars().write_csv(output)
        out.print(f"\n[bold green]Merge table written to {output}[/bold green]")
    out.print()


@app.command(name="cut")
def cut(
    matrix: Path = typer.Option(
        ...,
        "--matrix",
        "-d",
        help="Distance matrix CSV/TSV (first column and header row hold labels)",
        exists=True,
        dir_okay=False,
    ),
    method: LinkageMethod = typer.Option(
        LinkageMethod.SINGLE,
        "--method",
        "-m",
        help="Linkage method: single, complete, average, ward1 or ward2",
    ),
    k: int = typer.Option(
        1,
        "--k",
        "-k",
        help="Target number of clusters",
        min=1,
    ),
    height: float | None = typer.Option(
        None,
        "--height",
        "-h",
        help="Cut height (default: maximum merge height)",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write label,cluster assignments to this CSV file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress progress output",
    ),
) -> None:
    """
    Cut a dendrogram into flat clusters.

    Examples:

        # Three complete-linkage clusters
        hclustkit cluster cut -d distances.csv -m complete --k 3

        # Cut a single-linkage tree at height 0.2
        hclustkit cluster cut -d distances.csv --height 0.2 -o clusters.csv
    """
    from hclustkit.core.cutree import cutree

    configure_logging(console, verbose)
    out = QuietConsole(console, quiet=quiet)

    out.print("\n[bold blue]hclustkit Tree Cutter[/bold blue]\n")
    tree = _load_and_cluster(matrix, method, out, quiet)

    assignment = cutree(tree, k=k, h=height)
    assignments = pl.DataFrame(
        {
            "label": [str(label) for label in tree.labels],
            "cluster": assignment.tolist(),
        }
    )
    n_clusters = int(assignment.max())
    out.print(f"[bold]Clusters:[/bold] {n_clusters}")

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        assignments.write_csv(output)
        out.print(f"\n[bold green]Assignments written to {output}[/bold green]")
    else:
        table = Table(title="Cluster assignments")
        table.add_column("Label")
        table.add_column("Cluster", justify="right")
        for label, number in assignments.iter_rows():
            table.add_row(label, str(number))
        out.print(table)
    out.print()
