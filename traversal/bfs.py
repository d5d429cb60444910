import numpy as np
import torch
from collections import deque

from traversal.errors import InvalidArgumentError


def as_adjacency_matrix(matrix):
    """
    Convert an adjacency structure to a boolean numpy matrix.

    Args:
        matrix: Square 2-D array-like (nested lists, numpy array or torch tensor)

    Returns:
        adj: Boolean numpy array of shape (V, V)
    """
    if isinstance(matrix, torch.Tensor):
        matrix = matrix.detach().cpu().numpy()

    try:
        adj = np.asarray(matrix) != 0
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Adjacency matrix could not be read: {e}")

    if adj.ndim != 2 or adj.shape[0] != adj.shape[1]:
        raise InvalidArgumentError(f"Adjacency matrix must be square, got shape {adj.shape}")
    if adj.shape[0] == 0:
        raise InvalidArgumentError("Adjacency matrix has no vertices")
    return adj


def check_start(start, num_nodes):
    """Make sure the start vertex is an integer index in [0, num_nodes)"""
    if isinstance(start, (bool, np.bool_)) or not isinstance(start, (int, np.integer)):
        raise InvalidArgumentError(f"Start node {start!r} is not an integer vertex index")
    if not 0 <= start < num_nodes:
        raise InvalidArgumentError(f"Start node {start} not in graph with {num_nodes} nodes")
    return int(start)


def _expand(adj, start):
    visited = np.zeros(adj.shape[0], dtype=bool)
    visited[start] = True
    queue = deque([(start, 0)])

    while queue:
        node, depth = queue.popleft()
        yield node, depth

        # Scanning the row in ascending order fixes the order within a layer
        for j in np.flatnonzero(adj[node]):
            j = int(j)
            if not visited[j]:
                visited[j] = True
                queue.append((j, depth + 1))


def iter_bfs(matrix, start):
    """
    Breadth-first traversal over an adjacency matrix, yielding each vertex as it is dequeued.

    Input is validated when this function is called, so an invalid start raises
    before any vertex is produced.

    Args:
        matrix: Square adjacency matrix, non-zero entries are edges
        start: Index of the start vertex

    Returns:
        Iterator over vertex indices in visitation order
    """
    adj = as_adjacency_matrix(matrix)
    start = check_start(start, adj.shape[0])
    return (node for node, _ in _expand(adj, start))


def bfs_order(matrix, start):
    """Return every vertex reachable from start, in breadth-first visitation order"""
    return list(iter_bfs(matrix, start))


def bfs_layers(matrix, start):
    """
    Hop distance from start for every reachable vertex.

    Args:
        matrix: Square adjacency matrix
        start: Index of the start vertex

    Returns:
        levels: Dict {vertex: distance}, insertion order matches bfs_order
    """
    adj = as_adjacency_matrix(matrix)
    start = check_start(start, adj.shape[0])
    return {node: depth for node, depth in _expand(adj, start)}


def bfs_adj_list(adj_list, num_nodes, start):
    """
    Breadth-first traversal over an adjacency list in O(V + E).

    Neighbors are expanded in ascending index order so the result matches
    bfs_order on the equivalent adjacency matrix.

    Args:
        adj_list: Dict {vertex: iterable of neighbor indices}
        num_nodes: Number of vertices in the graph
        start: Index of the start vertex

    Returns:
        order: List of vertex indices in visitation order
    """
    start = check_start(start, num_nodes)

    visited = {start}
    queue = deque([start])
    order = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in sorted(set(adj_list.get(node, []))):
            if not 0 <= neighbor < num_nodes:
                continue  # Skip invalid indices
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return order
