"""
Command line demo driver for friendgraph.

Builds one of the sample friendship graphs, measures its centrality and prints
rankings, friend suggestions and star subgraphs.
Run with: python -m friendgraph --sample chain --kind betweenness
"""
import argparse
import logging
from typing import Dict, List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from .exceptions import InvalidArgumentError, handle_error
from .graph import FriendGraph
from .models import CentralityKind, Node, console as default_console
from .samples import SAMPLE_GRAPHS
from .settings import SettingsManager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="friendgraph",
        description="Measure influence within a sample friendship network.",
    )
    parser.add_argument("--sample", choices=sorted(SAMPLE_GRAPHS), default="chain",
                        help="Sample graph to analyze")
    parser.add_argument("--top", type=int, help="Number of top value groups to list")
    parser.add_argument("--kind", choices=[k.value for k in CentralityKind],
                        help="Centrality used for ranking")
    parser.add_argument("--suggest", type=int, metavar="ID",
                        help="Suggest friends among the friends of this person")
    parser.add_argument("--export-top", type=int, metavar="N",
                        help="Print star subgraphs for the top N degree groups")
    parser.add_argument("--settings", help="Path to a JSON settings file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def display_ranking(console: Console, nodes: List[Node], kind: CentralityKind, top: int):
    """Display ranked vertices in a table."""
    console.print(f"[bold]Top {top} {kind.value} centrality[/]")
    table = Table()
    table.add_column("Rank", style="dim")
    table.add_column("Person", style="cyan")
    table.add_column("Degree", justify="right")
    table.add_column("Closeness", justify="right")
    table.add_column("Betweenness", justify="right")

    for i, node in enumerate(nodes, 1):
        table.add_row(
            str(i),
            str(node.node_id),
            str(node.degree),
            repr(node.closeness),
            repr(node.betweenness),
        )
    console.print(table)


def display_suggestions(console: Console, person: int, suggestions: Dict[int, List[int]]):
    if not suggestions:
        console.print(f"[green]All friends of {person} already know each other.[/]")
        return

    console.print(f"[bold]Friend suggestions among friends of {person}[/]")
    table = Table()
    table.add_column("Friend", style="cyan")
    table.add_column("Could meet")
    for friend, suggested in suggestions.items():
        table.add_row(str(friend), ", ".join(str(s) for s in suggested))
    console.print(table)


def display_stars(console: Console, stars: List[FriendGraph], number: int):
    console.print(f"[bold]Top {number} degree subgraphs ({len(stars)})[/]")
    for star in stars:
        console.print(star.adjacency_string(), markup=False, highlight=False)


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or default_console

    settings = SettingsManager(args.settings).settings
    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level)

    top = args.top if args.top is not None else settings.default_top_n
    graph = SAMPLE_GRAPHS[args.sample]()

    try:
        kind = CentralityKind.parse(args.kind or settings.default_kind)
        with console.status("Measuring centrality..."):
            graph.measure_and_set_closeness_centrality(settings.isolated_closeness)
            graph.measure_and_set_betweenness_centrality()

        if settings.show_adjacency:
            console.print(graph.adjacency_string(), markup=False, highlight=False)

        display_ranking(console, graph.return_top_centrality_for(top, kind), kind, top)

        if args.suggest is not None:
            display_suggestions(console, args.suggest,
                                graph.suggest_friends_of_friends(args.suggest))

        if args.export_top is not None:
            display_stars(console, graph.export_top_degree_graphs(args.export_top), args.export_top)
    except InvalidArgumentError as e:
        handle_error(console, e, "Analysis", show_details=args.verbose)
        return 2

    return 0
