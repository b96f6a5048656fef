"""
Main CLI entry point for hclustkit.

Provides subcommands:
- cluster build: Build a dendrogram from a distance matrix file
- cluster cut: Cut a dendrogram into a flat partition
"""

from __future__ import annotations

import typer
from rich import print as rprint
from rich.console import Console

from hclustkit import __version__

app = typer.Typer(
    name="hclustkit",
    help="Agglomerative hierarchical clustering from distance matrices",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        rprint(f"hclustkit version {__version__}")
        raise typer.Exit


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """
    hclustkit: hierarchical clustering compatible with R's hclust().

    Builds single, complete, average and Ward dendrograms from a precomputed
    distance matrix and derives flat partitions from them.
    """


# Import subcommands
from hclustkit.cli import cluster

# Register subcommands
app.add_typer(cluster.app, name="cluster")


if __name__ == "__main__":
    app()
