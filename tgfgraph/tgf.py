"""Reader and writer for the Trivial Graph Format (TGF).

A TGF file lists the nodes, one per line as an id followed by the payload
encoded as JSON, then a line holding only "#", then one line per node that has
outgoing edges, listing the source id followed by the target ids:

    0 "cat"
    1 "car"
    2 "cow"
    #
    0 1 2
    2 0

Nodes without edges get no line in the second section.
"""

from __future__ import annotations

import json
import logging
import re
from io import StringIO
from pathlib import Path
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Optional,
    TextIO,
    TypeVar,
    Union,
)

from tgfgraph.errors import FormatError, GraphIOError
from tgfgraph.graph import Graph, Node

T = TypeVar("T")

SEPARATOR = "#"

NODE_LINE = re.compile(r"([0-9]+)\s(.+)")
NODE_ID = re.compile(r"[0-9]+")


class Codec(Generic[T]):

    """Converts payloads to and from their one-line text form.

    The default is compact JSON. Pass default to turn payloads that json cannot
    handle into ones it can, and object_hook to build payloads back from
    decoded JSON objects:

        codec = Codec(default=dataclasses.asdict, object_hook=lambda d: S(**d))
    """

    def __init__(
        self,
        default: Optional[Callable[[Any], Any]] = None,
        object_hook: Optional[Callable[[Dict[str, Any]], Any]] = None,
    ):
        self.default = default
        self.object_hook = object_hook

    def __repr__(self) -> str:
        return f"Codec(default={self.default!r}, object_hook={self.object_hook!r})"

    def encode(self, data: T) -> str:
        # Compact separators, and JSON escapes newlines, so this is one line.
        return json.dumps(
            data, default=self.default, separators=(",", ":"), ensure_ascii=False
        )

    def decode(self, text: str) -> T:
        return json.loads(text, object_hook=self.object_hook)


JSON: Codec[Any] = Codec()


def dump(graph: Graph[T], out: TextIO, codec: Optional[Codec[T]] = None):
    """Write graph to out in TGF."""
    codec = codec or JSON
    for node in graph.nodes.values():
        out.write(f"{node.id} {codec.encode(node.data)}\n")
    out.write(f"{SEPARATOR}\n")
    for node in graph.nodes.values():
        if node.adjacency:
            ids = " ".join(str(target) for target in node.adjacency)
            out.write(f"{node.id} {ids}\n")


def dumps(graph: Graph[T], codec: Optional[Codec[T]] = None) -> str:
    """Return graph as TGF text."""
    out = StringIO()
    dump(graph, out, codec)
    return out.getvalue()


def save_path(
    graph: Graph[T], path: Union[str, Path], codec: Optional[Codec[T]] = None
):
    """Write graph to a TGF file, replacing it if it exists.

    The text is built before the file is opened, so a payload that fails to
    encode leaves an existing file untouched.
    """
    text = dumps(graph, codec)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as ex:
        raise GraphIOError(path, ex) from ex
    logging.info("wrote %d nodes to %s", len(graph), path)


def load(
    lines: Iterable[str],
    codec: Optional[Codec[Any]] = None,
    source: Optional[str] = None,
) -> Graph[Any]:
    """Parse a graph from TGF lines (such as an open file).

    Raises FormatError on malformed input. The graph's id counter is set to one
    past the largest id read, so new nodes never collide with loaded ones.
    """
    codec = codec or JSON
    graph: Graph[Any] = Graph()
    in_nodes = True
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if line == SEPARATOR:
            in_nodes = False
            continue
        if not line.strip():
            continue
        if in_nodes:
            read_node(graph, line, codec, lineno, source)
        else:
            read_edges(graph, line, lineno, source)
    graph.next_id = max(graph.nodes, default=0) + 1
    logging.debug(
        "parsed %d nodes and %d edges from %s",
        len(graph),
        graph.edge_count(),
        source or "<text>",
    )
    return graph


def loads(text: str, codec: Optional[Codec[Any]] = None) -> Graph[Any]:
    """Parse a graph from TGF text."""
    # StringIO splits only on "\n", unlike str.splitlines, which would also
    # split payloads containing characters like U+2028.
    return load(StringIO(text), codec)


def load_path(path: Union[str, Path], codec: Optional[Codec[Any]] = None) -> Graph[Any]:
    """Load a graph from a TGF file.

    Raises GraphIOError if the file cannot be read, and FormatError if it is not
    valid TGF.
    """
    try:
        with open(path, encoding="utf-8") as f:
            graph = load(f, codec, source=str(path))
    except OSError as ex:
        raise GraphIOError(path, ex) from ex
    except UnicodeDecodeError as ex:
        raise FormatError(f"not UTF-8: {ex.reason}", source=str(path)) from ex
    logging.info("loaded %d nodes from %s", len(graph), path)
    return graph


def read_node(
    graph: Graph[Any],
    line: str,
    codec: Codec[Any],
    lineno: Optional[int] = None,
    source: Optional[str] = None,
):
    """Add the node declared by a line before the separator."""
    match = NODE_LINE.fullmatch(line)
    if not match:
        raise FormatError(f"invalid node line: {line!r}", lineno, source)
    node_id = int(match.group(1))
    if node_id in graph.nodes:
        raise FormatError(f"duplicate node id {node_id}", lineno, source)
    try:
        data = codec.decode(match.group(2))
    except (ValueError, TypeError) as ex:
        raise FormatError(
            f"cannot decode data for node {node_id}: {ex}", lineno, source
        ) from ex
    graph.nodes[node_id] = Node(node_id, data)


def read_edges(
    graph: Graph[Any],
    line: str,
    lineno: Optional[int] = None,
    source: Optional[str] = None,
):
    """Add the edges listed by a line after the separator."""
    tokens = line.split()
    for token in tokens:
        if not NODE_ID.fullmatch(token):
            raise FormatError(f"invalid node id {token!r}", lineno, source)
    src, *targets = (int(token) for token in tokens)
    if src not in graph.nodes:
        raise FormatError(f"edges from undeclared node {src}", lineno, source)
    for dst in targets:
        if dst not in graph.nodes:
            raise FormatError(f"edge to undeclared node {dst}", lineno, source)
        graph.nodes[src].add_target(dst)
