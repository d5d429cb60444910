import time
import random
import numpy as np
import pandas as pd
import networkx as nx
from tqdm import tqdm

from traversal.bfs import as_adjacency_matrix, bfs_order, bfs_adj_list
from traversal.errors import InvalidInputError
from utils.data import generate_random_graph, load_graph_data


def matrix_to_networkx(matrix):
    """Build a networkx graph with one node per row of the adjacency matrix"""
    adj = as_adjacency_matrix(matrix)
    G = nx.Graph()
    G.add_nodes_from(range(adj.shape[0]))
    rows, cols = np.nonzero(adj)
    G.add_edges_from(zip(rows.tolist(), cols.tolist()))
    return G


def check_traversal(matrix, start, order):
    """
    Check a traversal order against networkx shortest path lengths.

    Args:
        matrix: Square adjacency matrix
        start: Start vertex
        order: Visitation order to check

    Returns:
        checks: Dictionary {check_name: bool}
    """
    G = matrix_to_networkx(matrix)
    distances = nx.single_source_shortest_path_length(G, start)
    order_distances = [distances.get(node, -1) for node in order]

    return {
        'starts_at_source': bool(order) and order[0] == start,
        'no_duplicates': len(order) == len(set(order)),
        'reachable_set': set(order) == set(distances),
        'layered': all(a <= b for a, b in zip(order_distances, order_distances[1:])),
    }


def evaluate_random_graphs(num_graphs=20, num_vertices=50, edge_prob=0.05, seed=42):
    """
    Run BFS on random graphs from random start vertices and check every property.

    Args:
        num_graphs: Number of random graphs to generate
        num_vertices: Vertices per graph
        edge_prob: Edge probability for the Erdos-Renyi generator
        seed: Random seed for reproducibility

    Returns:
        results: DataFrame with one row per graph
        summary: Dictionary with pass rates and averages
    """
    if num_vertices < 1:
        raise InvalidInputError(f"Number of vertices must be positive, got {num_vertices}")

    rng = random.Random(seed)
    rows = []

    for i in tqdm(range(num_graphs), desc="Evaluating BFS"):
        graph_input = generate_random_graph(num_vertices, edge_prob, seed=rng.randrange(2**31))
        data = load_graph_data(graph_input)
        start = rng.randrange(num_vertices)

        start_time = time.time()
        order = bfs_order(data.adj_matrix, start)
        elapsed_time = time.time() - start_time

        checks = check_traversal(data.adj_matrix, start, order)
        checks['idempotent'] = bfs_order(data.adj_matrix, start) == order
        checks['adj_list_agrees'] = bfs_adj_list(data.adj_list, data.num_nodes, start) == order

        row = {
            'graph': i,
            'start': start,
            'num_edges': graph_input.num_edges,
            'visited': len(order),
            'time': elapsed_time,
        }
        row.update(checks)
        rows.append(row)

        if not all(checks.values()):
            failed = [name for name, ok in checks.items() if not ok]
            print(f"Warning: graph {i} from node {start} failed checks: {', '.join(failed)}")

    results = pd.DataFrame(rows)

    check_names = ['starts_at_source', 'no_duplicates', 'reachable_set', 'layered',
                   'idempotent', 'adj_list_agrees']
    summary = {
        'num_graphs': num_graphs,
        'pass_rate': {name: float(results[name].mean()) if rows else 0.0 for name in check_names},
        'avg_visited': float(results['visited'].mean()) if rows else 0.0,
        'avg_time': float(results['time'].mean()) if rows else 0.0,
    }
    summary['all_passed'] = bool(rows) and all(rate == 1.0 for rate in summary['pass_rate'].values())

    return results, summary
