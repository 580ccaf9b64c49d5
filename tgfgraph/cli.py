"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple

from tgfgraph.config import DemoConfig
from tgfgraph.errors import GraphError
from tgfgraph.graph import Graph
from tgfgraph.logs import fatal, setup_logging


def main(argv: Optional[List[str]] = None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    log_level = logging.WARNING
    if args.verbose and args.verbose == 1:
        log_level = logging.INFO
    elif args.verbose and args.verbose >= 2:
        log_level = logging.DEBUG
    exit_level = logging.ERROR
    if args.keep_going:
        exit_level = logging.FATAL
    setup_logging(sys.stderr, log_level, exit_level)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(prog="tgf", description="tool for inspecting TGF graphs")
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_show = commands.add_parser(
        "show", help="print id, adjacent ids, and data of reachable nodes"
    )
    parser_dump = commands.add_parser("dump", help="parse and re-serialize a graph")
    parser_check = commands.add_parser("check", help="validate a graph file")

    for subparser in [parser_show, parser_dump, parser_check]:
        subparser.add_argument(
            "file", nargs="?", help="TGF file (default: graph_file from tgf.yml)"
        )
        subparser.add_argument(
            "-r", "--root", type=int, help="node id to start traversal from"
        )
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are config errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def load_graph(args: Namespace) -> Tuple[Graph[Any], int]:
    """Load the graph named by args (or the config) and pick the root."""
    cfg = DemoConfig.find()
    path = Path(args.file or cfg["graph_file"])
    root = cfg["root"] if args.root is None else args.root
    try:
        graph = Graph.from_tgf_file(path)
    except GraphError as ex:
        fatal("cannot load graph: %s", ex)
    return graph, root


def reachable(graph: Graph[Any], root: int) -> List[int]:
    try:
        return graph.node_ids(root)
    except GraphError as ex:
        fatal("cannot traverse graph: %s", ex)


def command_show(args: Namespace):
    graph, root = load_graph(args)
    for node_id in reachable(graph, root):
        print(f"Node id: {node_id}")
        print(f"Adjacent nodes ids: {graph.get_adjacent_ids(node_id)}")
        print(f"Data: {graph.get_data(node_id)}")


def command_dump(args: Namespace):
    graph, _ = load_graph(args)
    graph.dump(sys.stdout)


def command_check(args: Namespace):
    graph, root = load_graph(args)
    if root in graph:
        ids = reachable(graph, root)
    else:
        logging.warning("root node %d does not exist", root)
        ids = []
    unreachable = len(graph) - len(ids)
    print(
        f"{len(graph)} nodes, {graph.edge_count()} edges, "
        f"{len(ids)} reachable from {root}"
    )
    if unreachable:
        logging.info("%d nodes unreachable from %d", unreachable, root)
