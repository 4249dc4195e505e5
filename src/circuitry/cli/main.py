"""circuitry CLI main entry point."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from circuitry.config import AnalysisConfig
from circuitry.core.point import Point
from circuitry.engine.analysis import CircuitAnalyzer
from circuitry.engine.selection import select_shortest_edges
from circuitry.extraction.points import PointParseError, load_points

app = typer.Typer(
    name="circuitry",
    help="Connect junction boxes by shortest distances and report on the circuits",
    no_args_is_help=True,
)

InputOpt = Annotated[
    Path,
    typer.Option(
        "--input",
        "-i",
        help="Point file, one x,y,z record per line",
        exists=True,
        dir_okay=False,
    ),
]
ConfigOpt = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="TOML file with an [analysis] table"),
]
VerboseOpt = Annotated[
    bool, typer.Option("--verbose", "-v", help="Enable debug logging")
]


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def read_points(path: Path) -> list[Point]:
    """Load points, turning parse failures into a CLI error exit."""
    try:
        return load_points(path)
    except PointParseError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None


def load_config(config_path: Path | None) -> AnalysisConfig:
    try:
        return AnalysisConfig.load(config_path)
    except ValueError as e:
        typer.secho(f"Error: invalid config: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None


@app.command()
def solve(
    input_path: InputOpt,
    part: Annotated[int, typer.Option("--part", "-p", help="Part to solve (1 or 2)")] = 1,
    capacity: Annotated[
        Optional[int],
        typer.Option("--capacity", "-k", min=0, help="Shortest edges to keep for part 1"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Where to write the answer (default: output.txt)"),
    ] = None,
    config_path: ConfigOpt = None,
    json_output: Annotated[
        bool, typer.Option("--json", "-j", help="Print the full report as JSON instead")
    ] = False,
    verbose: VerboseOpt = False,
) -> None:
    """Determine the solution for one part and write it to the output file.

    Part 1 multiplies the sizes of the three largest circuits formed by the
    K shortest connections. Part 2 multiplies the x-coordinates of the last
    pair joined when connecting everything shortest first.

    Examples:
        circuitry solve -i input.txt --part 1
        circuitry solve -i input.txt -p 1 -k 10
        circuitry solve -i input.txt -p 2 --json
    """
    configure_logging(verbose)
    config = load_config(config_path)
    analyzer = CircuitAnalyzer(read_points(input_path), config)

    if part not in (1, 2):
        typer.secho(f"Invalid part specified: {part}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if json_output:
        if part == 1:
            data = analyzer.connect_shortest(capacity).to_dict()
        else:
            data = analyzer.final_connection().to_dict()
        typer.echo(json.dumps(data, indent=2))
        return

    if part == 1 and capacity is not None:
        answer = str(analyzer.connect_shortest(capacity).product)
    else:
        answer = analyzer.solve(part)

    output_path = output or Path(config.output_path)
    output_path.write_text(answer, encoding="utf-8")
    typer.echo(f"Successfully determined solution {input_path} -> {output_path}")


@app.command()
def edges(
    input_path: InputOpt,
    limit: Annotated[int, typer.Option("--limit", "-n", min=0, help="Edges to show")] = 10,
    verbose: VerboseOpt = False,
) -> None:
    """List the shortest connections between points.

    Examples:
        circuitry edges -i input.txt
        circuitry edges -i input.txt --limit 25
    """
    configure_logging(verbose)
    points = read_points(input_path)

    for edge in select_shortest_edges(points, limit):
        a, b = points[edge.u], points[edge.v]
        typer.echo(
            f"{edge.u:>5} {edge.v:>5}  d²={edge.distance:<12} "
            f"{a.as_tuple()} - {b.as_tuple()}"
        )


@app.command()
def components(
    input_path: InputOpt,
    capacity: Annotated[
        Optional[int],
        typer.Option("--capacity", "-k", min=0, help="Shortest edges to connect"),
    ] = None,
    config_path: ConfigOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Show circuit sizes after connecting the K shortest edges.

    Examples:
        circuitry components -i input.txt -k 10
    """
    configure_logging(verbose)
    config = load_config(config_path)
    report = CircuitAnalyzer(read_points(input_path), config).connect_shortest(capacity)

    typer.echo(f"Circuits: {len(report.component_sizes)}")
    typer.echo(f"Sizes: {', '.join(str(s) for s in report.component_sizes)}")
    typer.secho(
        f"[edges: {report.edges_used}, merges: {report.merges}, product: {report.product}]",
        fg=typer.colors.BRIGHT_BLACK,
    )


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
