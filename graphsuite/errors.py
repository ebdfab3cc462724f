"""Exception hierarchy for graphsuite.

Every exception derives from ``GraphError`` and from the built-in exception
that best matches its meaning, so callers can catch either.
"""


class GraphError(Exception):
    """Base exception for graphsuite errors."""


class VertexNotFoundError(GraphError, KeyError):
    """Raised when a vertex id is not present in the graph."""

    def __init__(self, vertex: int) -> None:
        super().__init__(f"Vertex '{vertex}' does not exist.")
        self.vertex = vertex

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class EdgeNotFoundError(GraphError, KeyError):
    """Raised when no edge connects the given vertices."""

    def __init__(self, src: int, dst: int) -> None:
        super().__init__(f"No edge from '{src}' to '{dst}'.")
        self.src = src
        self.dst = dst

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidHandleError(GraphError, KeyError):
    """Raised when a heap handle is stale or belongs to another heap."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Invalid heap handle."


class GraphPreconditionError(GraphError, ValueError):
    """Raised when an algorithm is called on a graph it does not support."""


class DirectedGraphError(GraphPreconditionError):
    """Raised when an undirected-only algorithm receives a directed graph."""


class WeightRequiredError(GraphPreconditionError):
    """Raised when a weighted-only operation receives an unweighted graph."""


class NegativeWeightError(GraphPreconditionError):
    """Raised when an algorithm requiring non-negative weights finds a negative one."""


class DisconnectedGraphError(GraphPreconditionError):
    """Raised when an algorithm requiring a connected graph cannot reach every vertex."""


class NegativeCycleError(GraphError, ValueError):
    """Raised when Bellman-Ford detects a reachable negative-weight cycle."""


class GraphFormatError(GraphError, ValueError):
    """Raised when persisted graph data is malformed."""
