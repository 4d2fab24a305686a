import logging
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from graphwalk._errors import GraphError
from graphwalk._mode import GraphMode

from .config import ConfigError, GraphwalkConfig, Strategy, get_config
from .render import render_order, render_steps
from .walk import EdgeSpec, EdgeSpecError, build_graph, make_traversal, parse_edge, run_traversal, topological_labels

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

EdgesArgument = Annotated[
    list[str],
    typer.Argument(help="Edges as SOURCE:TARGET or SOURCE:TARGET:WEIGHT"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Graphwalk CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]✗ {escape(message)}[/red]")
    raise typer.Exit(code=1)


def _load_config() -> GraphwalkConfig:
    try:
        return get_config()
    except ConfigError as e:
        _fail(str(e))


def _resolve_mode(config: GraphwalkConfig, **overrides: bool | None) -> GraphMode:
    """Apply command-line flags on top of the configured graph mode."""
    flags = config.mode.model_dump()
    flags.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return GraphMode(**flags)
    except ValidationError as e:
        _fail(f"Invalid graph mode: {e.errors()[0]['msg']}")


def _parse_edges(edges: list[str]) -> list[EdgeSpec]:
    try:
        return [parse_edge(text) for text in edges]
    except EdgeSpecError as e:
        _fail(str(e))


@app.command()
def traverse(
    edges: EdgesArgument,
    *,
    start: Annotated[
        str,
        typer.Option("--start", "-s", help="Label of the vertex to start from"),
    ],
    strategy: Annotated[
        Strategy | None,
        typer.Option("--strategy", help="Traversal strategy (defaults to [tool.graphwalk].strategy or bfs)"),
    ] = None,
    directed: Annotated[
        bool | None,
        typer.Option("--directed/--undirected", help="Treat edges as directed"),
    ] = None,
    weighted: Annotated[
        bool | None,
        typer.Option("--weighted/--unweighted", help="Use edge weights for closest-first ordering"),
    ] = None,
    max_steps: Annotated[
        int | None,
        typer.Option("--max-steps", min=1, help="Maximum number of vertices a random walk produces"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for the random walk"),
    ] = None,
) -> None:
    """Traverse a graph built from edges and print the visited vertices."""
    config = _load_config()
    mode = _resolve_mode(config, directed=directed, weighted=weighted)
    strategy = strategy or config.strategy
    if max_steps is None:
        max_steps = config.max_steps
    if seed is None:
        seed = config.seed

    try:
        graph = build_graph(_parse_edges(edges), mode)
        logger.debug(f"Built graph with {graph.order} vertices and {graph.size} edges")
        traversal = make_traversal(graph, start, strategy, max_steps=max_steps, seed=seed)
    except GraphError as e:
        _fail(str(e))

    if strategy is Strategy.RANDOM and max_steps is None and graph.size > 0:
        logger.warning("Random walk without --max-steps may not terminate on graphs with cycles")

    render_steps(run_traversal(traversal), strategy, out_console)


@app.command()
def topo(
    edges: EdgesArgument,
    *,
    stable: Annotated[
        bool,
        typer.Option("--stable", help="Break ties between available vertices by label"),
    ] = False,
    reverse: Annotated[
        bool,
        typer.Option("--reverse", help="With --stable, break ties by descending label"),
    ] = False,
    acyclic: Annotated[
        bool | None,
        typer.Option("--acyclic/--cyclic", help="Reject edges that close a cycle while building"),
    ] = None,
) -> None:
    """Print the topological order of a graph built from edges."""
    config = _load_config()
    mode = _resolve_mode(config, acyclic=acyclic)

    if reverse and not stable:
        logger.warning("--reverse has no effect without --stable")

    try:
        graph = build_graph(_parse_edges(edges), mode)
        labels = topological_labels(graph, stable=stable, reverse=reverse)
    except GraphError as e:
        _fail(str(e))

    render_order(labels, out_console)


def main() -> None:
    app()
