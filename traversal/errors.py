class InvalidArgumentError(ValueError):
    """Raised when a traversal is asked to start from a vertex that is not in the graph,
    or is handed something that is not a square adjacency matrix."""


class InvalidInputError(ValueError):
    """Raised by the graph loaders on malformed counts, tokens or edge endpoints."""
