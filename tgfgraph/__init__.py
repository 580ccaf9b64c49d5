"""In-memory directed graphs with a Trivial Graph Format reader and writer."""

from tgfgraph.errors import (
    FormatError,
    GraphError,
    GraphIOError,
    IdNotExistError,
    IndexOutOfRangeError,
)
from tgfgraph.graph import Graph, Node
from tgfgraph.tgf import JSON, Codec

__all__ = [
    "Codec",
    "FormatError",
    "Graph",
    "GraphError",
    "GraphIOError",
    "IdNotExistError",
    "IndexOutOfRangeError",
    "JSON",
    "Node",
]
