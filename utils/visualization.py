import os
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import networkx as nx

from traversal.bfs import bfs_layers


def visualize_traversal(data, order, output_dir='plots'):
    """
    Visualize a breadth-first traversal, coloring nodes by BFS layer.

    Args:
        data: Graph data object with adj_matrix and adj_list
        order: Vertices in visitation order, starting with the start vertex
        output_dir: Directory the figure is written to

    Returns:
        Path of the saved figure, or None if there was nothing to draw
    """
    if not order:
        print("No traversal to visualize")
        return None

    start = order[0]
    levels = bfs_layers(data.adj_matrix, start)
    rank = {node: i for i, node in enumerate(order)}

    # Reachable subgraph only
    G = nx.Graph()
    G.add_nodes_from(order)
    for node in order:
        for neighbor in data.adj_list.get(node, []):
            if neighbor in rank:
                G.add_edge(node, neighbor)

    plt.figure(figsize=(12, 10))
    pos = nx.spring_layout(G, seed=42)

    nx.draw_networkx_edges(G, pos, alpha=0.3, edge_color='gray')

    others = [node for node in order if node != start]
    if others:
        nx.draw_networkx_nodes(G, pos, nodelist=others,
                               node_color=[levels[node] for node in others],
                               cmap=plt.cm.viridis, vmin=0, vmax=max(levels.values()),
                               node_size=500)

    nx.draw_networkx_nodes(G, pos, nodelist=[start], node_color='green',
                           node_size=800, node_shape='s')

    # Label every node "vertex (visit rank)"
    labels = {node: f"{node}\n#{rank[node]}" for node in order}
    nx.draw_networkx_labels(G, pos, labels=labels, font_size=8, font_weight='bold')

    plt.title(f'BFS from node {start} ({len(order)} nodes, {max(levels.values()) + 1} layers)')
    plt.axis('off')
    plt.tight_layout()

    os.makedirs(output_dir, exist_ok=True)
    plot_path = os.path.join(output_dir, f'bfs_from_{start}.png')
    plt.savefig(plot_path)
    plt.close()

    print(f"Traversal visualization saved to '{plot_path}'")
    return plot_path
