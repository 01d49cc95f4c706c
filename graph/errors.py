"""Exceptions raised by the graph core."""


class GraphError(Exception):
    """Base class for graph / path-finding errors."""


class EdgeNotFound(GraphError, LookupError):
    """No edge from `source` to `target` exists in the store.

    Only reachable with a route that did not come from a search over the
    same store, so callers treat it as a bug rather than user error.
    """

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"No edge between '{source}' and '{target}'")


class UnknownAlgorithm(GraphError, ValueError):
    """Raised when an algorithm key is not in the registry."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown algorithm: {key}")
