import torch
import numpy as np
import pandas as pd
import networkx as nx
from typing import List, NamedTuple, Optional, Tuple
from torch_geometric.data import Data
from torch_geometric.utils import to_undirected

from traversal.errors import InvalidInputError


class GraphInput(NamedTuple):
    """Vertex count, undirected edge pairs and (optionally) the vertex to start from."""
    num_vertices: int
    edges: List[Tuple[int, int]]
    start: Optional[int] = None

    @property
    def num_edges(self):
        return len(self.edges)


def _check_edges(num_vertices, edges):
    if num_vertices < 1:
        raise InvalidInputError(f"Number of vertices must be positive, got {num_vertices}")
    for u, v in edges:
        if not (0 <= u < num_vertices and 0 <= v < num_vertices):
            raise InvalidInputError(f"Edge ({u}, {v}) has an endpoint outside [0, {num_vertices})")


def parse_graph_text(text, require_start=True):
    """
    Parse a graph in console order: "V E u1 v1 ... uE vE s".

    Args:
        text: Whitespace separated integers
        require_start: Whether the trailing start vertex must be present

    Returns:
        GraphInput
    """
    tokens = text.split()
    values = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            raise InvalidInputError(f"Expected an integer, got {token!r}")

    if len(values) < 2:
        raise InvalidInputError("Input must start with the number of vertices and edges")

    num_vertices, num_edges = values[0], values[1]
    if num_edges < 0:
        raise InvalidInputError(f"Number of edges must not be negative, got {num_edges}")

    edge_values = values[2:2 + 2 * num_edges]
    if len(edge_values) < 2 * num_edges:
        raise InvalidInputError(
            f"Expected {num_edges} edges but only {len(edge_values) // 2} complete pairs were given")
    edges = list(zip(edge_values[0::2], edge_values[1::2]))
    _check_edges(num_vertices, edges)

    rest = values[2 + 2 * num_edges:]
    if len(rest) > 1:
        raise InvalidInputError(f"Unexpected trailing values: {rest[1:]}")
    if not rest and require_start:
        raise InvalidInputError("Missing starting node")

    start = rest[0] if rest else None
    return GraphInput(num_vertices, edges, start)


def read_graph_input(stream, require_start=True):
    """Read a graph in console order from an open text stream"""
    try:
        text = stream.read()
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"Input is not valid text: {e}")
    return parse_graph_text(text, require_start=require_start)


def load_edge_file(edge_file, num_nodes=None):
    """
    Load an undirected graph from a CSV edge list with integer id1,id2 columns.

    Args:
        edge_file: Path to the CSV edge list
        num_nodes: Number of vertices (if None, one more than the largest id)

    Returns:
        GraphInput without a start vertex
    """
    try:
        df = pd.read_csv(edge_file)
    except pd.errors.EmptyDataError:
        raise InvalidInputError(f"Edge file {edge_file} is empty")
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"Edge file {edge_file} is not valid text: {e}")
    except OSError as e:
        raise InvalidInputError(f"Could not read edge file {edge_file}: {e}")

    if 'id1' not in df.columns or 'id2' not in df.columns:
        raise InvalidInputError(f"Edge file {edge_file} needs 'id1' and 'id2' columns")

    # Floats, blanks and strings all fail here rather than being truncated
    if not df.empty:
        for col in ('id1', 'id2'):
            if not pd.api.types.is_integer_dtype(df[col]):
                raise InvalidInputError(f"Edge file {edge_file} has non-integer ids in column {col}")

    pairs = df[['id1', 'id2']].astype(int).values.tolist()

    edges = [(u, v) for u, v in pairs]
    if num_nodes is None:
        if not edges:
            raise InvalidInputError(f"Edge file {edge_file} has no edges and no node count was given")
        num_nodes = max(max(u, v) for u, v in edges) + 1

    _check_edges(num_nodes, edges)
    print(f"Loaded {len(edges)} edges over {num_nodes} nodes from {edge_file}")
    return GraphInput(num_nodes, edges)


def build_adjacency_matrix(graph_input):
    """Boolean V x V matrix with both [u][v] and [v][u] set for every edge"""
    _check_edges(graph_input.num_vertices, graph_input.edges)

    matrix = np.zeros((graph_input.num_vertices, graph_input.num_vertices), dtype=bool)
    for u, v in graph_input.edges:
        matrix[u, v] = True
        matrix[v, u] = True
    return matrix


def load_graph_data(graph_input):
    """
    Build a graph data object from a GraphInput.

    Args:
        graph_input: GraphInput with vertex count and edges

    Returns:
        Data object with an undirected edge_index, plus adj_matrix and adj_list
    """
    matrix = build_adjacency_matrix(graph_input)
    num_nodes = graph_input.num_vertices

    if graph_input.edges:
        edge_index = torch.tensor(graph_input.edges, dtype=torch.long).t().contiguous()
        edge_index = to_undirected(edge_index, num_nodes=num_nodes)
    else:
        edge_index = torch.empty((2, 0), dtype=torch.long)

    data = Data(edge_index=edge_index, num_nodes=num_nodes)
    data.adj_matrix = matrix

    # Ascending neighbor lists for adjacency-list traversal
    data.adj_list = {i: np.flatnonzero(matrix[i]).tolist() for i in range(num_nodes)}

    if graph_input.start is not None:
        data.start = graph_input.start

    return data


def generate_random_graph(num_vertices, edge_prob=0.1, seed=None, start=None):
    """Erdos-Renyi random graph as a GraphInput"""
    if num_vertices < 1:
        raise InvalidInputError(f"Number of vertices must be positive, got {num_vertices}")
    G = nx.gnp_random_graph(num_vertices, edge_prob, seed=seed)
    edges = [(int(u), int(v)) for u, v in G.edges()]
    return GraphInput(num_vertices, edges, start)
