"""Generic directed graph structure."""

from __future__ import annotations

import copy
import logging
import sys
from pathlib import Path
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Generic,
    Iterator,
    List,
    Optional,
    TextIO,
    TypeVar,
    Union,
)

from tgfgraph.errors import IdNotExistError, IndexOutOfRangeError

if TYPE_CHECKING:
    from tgfgraph.tgf import Codec

T = TypeVar("T")


class Node(Generic[T]):

    """A node in a graph.

    Holds the node's id, its payload, and the ids of the nodes it has edges to.
    The adjacency list behaves like an ordered set: targets keep the order they
    were added in, and adding one twice has no effect.
    """

    def __init__(self, node_id: int, data: T):
        self.id = node_id
        self.data = data
        self.adjacency: List[int] = []

    def __repr__(self) -> str:
        return f"Node(id={self.id!r}, data={self.data!r}, adjacency={self.adjacency!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.id == other.id
            and self.data == other.data
            and self.adjacency == other.adjacency
        )

    def add_target(self, target: int) -> bool:
        """Add an edge to target. Returns False if it was already there."""
        if target in self.adjacency:
            return False
        self.adjacency.append(target)
        return True

    def remove_target(self, target: int) -> bool:
        """Remove the edge to target. Returns False if there was none."""
        try:
            self.adjacency.remove(target)
        except ValueError:
            return False
        return True


class Graph(Generic[T]):

    """A directed graph whose nodes carry payloads of type T.

    Nodes are named by integer ids handed out by a counter that only goes up, so
    ids of removed nodes are never reused. Nodes are kept in insertion order,
    which is also the order they are written in by to_text().

    Example usage:

        graph: Graph[str] = Graph()
        cat = graph.add_node("cat")
        car = graph.add_node("car")
        graph.add_edge(cat, car)
        graph.node_ids()  # [0, 1]
    """

    def __init__(self):
        self.next_id = 0
        self.nodes: Dict[int, Node[T]] = {}

    def __repr__(self) -> str:
        return f"Graph(N={len(self.nodes)}, next_id={self.next_id})"

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[int]:
        """Iterate over all node ids in insertion order."""
        return iter(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return self.contains(node_id)

    def __eq__(self, other: object) -> bool:
        # The allocator counter is bookkeeping, not graph structure.
        if not isinstance(other, Graph):
            return NotImplemented
        return list(self.nodes.values()) == list(other.nodes.values())

    def allocate(self) -> int:
        """Return a fresh node id."""
        node_id = self.next_id
        self.next_id += 1
        return node_id

    def contains(self, node_id: int) -> bool:
        """Return True if the graph has a node with the given id.

        Only real ints count: 1.0 and True compare equal to 1 but are not ids.
        """
        return type(node_id) is int and node_id in self.nodes

    def _check(self, *node_ids: int):
        for node_id in node_ids:
            if not self.contains(node_id):
                raise IdNotExistError(node_id)

    def _lookup(self, node_id: int) -> Node[T]:
        if not self.contains(node_id):
            raise IndexOutOfRangeError(node_id)
        return self.nodes[node_id]

    def add_node(self, data: T) -> int:
        """Add a node with no edges and return its id."""
        node_id = self.allocate()
        self.nodes[node_id] = Node(node_id, data)
        return node_id

    def remove_node(self, node_id: int):
        """Remove a node along with every edge pointing to it.

        Raises IdNotExistError if there is no such node.
        """
        self._check(node_id)
        del self.nodes[node_id]
        for node in self.nodes.values():
            node.remove_target(node_id)
        logging.debug("removed node %d", node_id)

    def add_edge(self, src: int, dst: int):
        """Add an edge from src to dst. Adding an existing edge does nothing.

        Raises IdNotExistError if either node is missing.
        """
        self._check(src, dst)
        self.nodes[src].add_target(dst)

    def remove_edge(self, src: int, dst: int):
        """Remove the edge from src to dst, if there is one.

        Raises IdNotExistError if either node is missing, even though a missing
        edge between two existing nodes is not an error.
        """
        self._check(src, dst)
        self.nodes[src].remove_target(dst)

    def get_data(self, node_id: int) -> T:
        """Return a copy of the node's payload."""
        return copy.deepcopy(self._lookup(node_id).data)

    def get_adjacent_ids(self, node_id: int) -> List[int]:
        """Return the ids the node has edges to, in the order they were added."""
        return list(self._lookup(node_id).adjacency)

    def node_ids(self, root: int = 0) -> List[int]:
        """Return the ids reachable from root in depth-first preorder.

        Targets are explored in adjacency order, and each branch is finished
        before moving on to the next sibling. Nodes not reachable from root are
        left out.
        """
        self._lookup(root)
        visited = [root]
        seen = {root}
        stack = [iter(self.nodes[root].adjacency)]
        while stack:
            for node_id in stack[-1]:
                if node_id not in seen:
                    seen.add(node_id)
                    visited.append(node_id)
                    stack.append(iter(self.nodes[node_id].adjacency))
                    break
            else:
                stack.pop()
        return visited

    def edge_count(self) -> int:
        """Return the total number of edges."""
        return sum(len(node.adjacency) for node in self.nodes.values())

    def to_text(self, codec: Optional[Codec] = None) -> str:
        """Serialize the graph to TGF text."""
        from tgfgraph import tgf

        return tgf.dumps(self, codec)

    get_tgf = to_text

    def dump(self, out: Optional[TextIO] = None, codec: Optional[Codec] = None):
        """Write the graph as TGF text to out (default: stdout)."""
        from tgfgraph import tgf

        tgf.dump(self, out or sys.stdout, codec)

    def save(self, path: Union[str, Path], codec: Optional[Codec] = None):
        """Write the graph as TGF text to a file."""
        from tgfgraph import tgf

        tgf.save_path(self, path, codec)

    @staticmethod
    def from_text(text: str, codec: Optional[Codec] = None) -> Graph[Any]:
        """Parse a graph from TGF text."""
        from tgfgraph import tgf

        return tgf.loads(text, codec)

    @staticmethod
    def from_tgf_file(
        path: Union[str, Path], codec: Optional[Codec] = None
    ) -> Graph[Any]:
        """Load a graph from a TGF file."""
        from tgfgraph import tgf

        return tgf.load_path(path, codec)
