"""CLI entry point for graphite."""

import json
import sys

import click

from graphite.compiler import compile_source
from graphite.config import LANGUAGES, CompileConfig
from graphite.errors import CompileError
from graphite.ir.graph import Graph
from graphite.log import setup_logging
from graphite.simulator import ALGORITHMS, run_algorithm


def _summary(graph: Graph) -> str:
    lines = [f"{graph.vertex_count()} vertices, {graph.edge_count()} edges"]
    for edge in graph.edges.values():
        arrow = "->" if edge.directed else "--"
        weight = "" if edge.weight is None else f" [{edge.weight:g}]"
        lines.append(f"  {edge.id}: {edge.source} {arrow} {edge.target}{weight}")
    isolated = [v.id for v in graph.vertices.values() if not v.ins and not v.outs]
    if isolated:
        lines.append(f"  isolated: {', '.join(isolated)}")
    components = graph.connected_components()
    lines.append(f"{len(components)} connected component(s)")
    return "\n".join(lines) + "\n"


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--lang", "-l", "language", type=click.Choice(LANGUAGES), default="graphene", help="Source language")
@click.option("--json", "as_json", is_flag=True, help="Print the compiled graph, or the --algorithm trace, as JSON")
@click.option("--algorithm", "-a", "algorithm", type=click.Choice(sorted(ALGORITHMS)), default=None, help="Trace an algorithm")
@click.option("--start", "-s", "start", type=str, default=None, help="Start vertex for --algorithm")
@click.option("--verbose", "-v", is_flag=True, help="Log pipeline stages to stderr")
def main(input: str | None, language: str, as_json: bool, algorithm: str | None, start: str | None, verbose: bool) -> None:
    """Compile a graph description (graphene or adot) and report the graph."""
    config = CompileConfig(language=language, log_level="DEBUG" if verbose else "WARNING")
    setup_logging(config.log_level)

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        graph = compile_source(text, config.language)
    except CompileError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    if algorithm is not None:
        try:
            steps = run_algorithm(algorithm, graph, start=start)
        except ValueError as e:
            click.echo(f"error: {e}", err=True)
            sys.exit(1)
        if as_json:
            click.echo(json.dumps([step.to_dict() for step in steps], indent=2, ensure_ascii=False))
            return
        for number, step in enumerate(steps, start=1):
            click.echo(f"{number}. {step.description}")
        return

    if as_json:
        click.echo(json.dumps(graph.to_dict(), indent=2))
    else:
        click.echo(_summary(graph), nl=False)


if __name__ == "__main__":
    main()
