"""Exceptions raised by graph operations and the TGF codec."""

from pathlib import Path
from typing import Optional, Union


class GraphError(Exception):

    """Base class for all graph errors."""


class IdNotExistError(GraphError, KeyError):

    """An operation referenced a node id that is not in the graph."""

    def __init__(self, node_id: int):
        super().__init__(node_id)
        self.id = node_id

    def __str__(self) -> str:
        return f"node {self.id} does not exist"


class IndexOutOfRangeError(IdNotExistError, IndexError):

    """A lookup (payload, adjacency, or traversal root) missed.

    Subclasses IdNotExistError, so callers that only care about missing ids can
    catch that instead.
    """


class GraphIOError(GraphError, OSError):

    """Reading or writing a graph file failed."""

    def __init__(self, path: Union[str, Path], error: OSError):
        super().__init__(f"{path}: {error.strerror or error}")
        self.path = path


class FormatError(GraphError, ValueError):

    """Malformed TGF input."""

    def __init__(
        self, message: str, lineno: Optional[int] = None, source: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.lineno = lineno
        self.source = source

    def __str__(self) -> str:
        prefix = ""
        if self.source is not None:
            prefix += f"{self.source}:"
        if self.lineno is not None:
            prefix += f"{self.lineno}:"
        if prefix:
            return f"{prefix} {self.message}"
        return self.message
