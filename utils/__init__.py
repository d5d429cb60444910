from utils.data import (
    GraphInput,
    parse_graph_text,
    read_graph_input,
    load_edge_file,
    build_adjacency_matrix,
    load_graph_data,
    generate_random_graph,
)
from utils.evaluation import (
    check_traversal,
    evaluate_random_graphs,
)
from utils.visualization import visualize_traversal

__all__ = [
    'GraphInput',
    'parse_graph_text',
    'read_graph_input',
    'load_edge_file',
    'build_adjacency_matrix',
    'load_graph_data',
    'generate_random_graph',
    'check_traversal',
    'evaluate_random_graphs',
    'visualize_traversal',
]
