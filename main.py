import argparse
import sys
import random
import numpy as np
import torch

from traversal import iter_bfs, InvalidArgumentError, InvalidInputError
from utils import (
    read_graph_input,
    load_edge_file,
    load_graph_data,
    evaluate_random_graphs,
    visualize_traversal,
)

def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Breadth-first traversal of an undirected graph')

    parser.add_argument('--mode', type=str, choices=['traverse', 'evaluate', 'visualize'],
                        default='traverse', help='Operation mode')

    parser.add_argument('--input', type=str, default='-',
                        help='Graph in "V E u1 v1 ... uE vE start" form (- for stdin)')

    parser.add_argument('--edge_file', type=str, default=None,
                        help='Path to a CSV edge list with id1,id2 columns (overrides --input)')

    parser.add_argument('--num_nodes', type=int, default=None,
                        help='Number of vertices (edge files and evaluate mode)')

    parser.add_argument('--start', type=int, default=None,
                        help='Starting node (overrides the one read from --input)')

    parser.add_argument('--num_graphs', type=int, default=20,
                        help='Number of random graphs to check in evaluate mode')

    parser.add_argument('--edge_prob', type=float, default=0.05,
                        help='Edge probability for random graphs in evaluate mode')

    parser.add_argument('--plot_dir', type=str, default='plots',
                        help='Directory for visualize mode figures')

    parser.add_argument('--seed', type=int, default=42,
                        help='Random seed for reproducibility')

    return parser.parse_args(argv)

def load_input(args):
    """Load the graph and start vertex named by the command line"""
    if args.edge_file is not None:
        graph_input = load_edge_file(args.edge_file, num_nodes=args.num_nodes)
    elif args.input == '-':
        graph_input = read_graph_input(sys.stdin, require_start=args.start is None)
    else:
        try:
            with open(args.input, 'r', encoding='utf-8') as f:
                graph_input = read_graph_input(f, require_start=args.start is None)
        except OSError as e:
            raise InvalidInputError(f"Could not read {args.input}: {e}")

    start = args.start if args.start is not None else graph_input.start
    if start is None:
        raise InvalidInputError("Missing starting node, pass --start")

    return load_graph_data(graph_input), start

def run_traversal(data, start, out=None):
    """Print the traversal as vertices come off the queue and return the order"""
    out = out or sys.stdout
    nodes = iter_bfs(data.adj_matrix, start)

    order = []
    out.write(f"starting from node {start}: ")
    for node in nodes:
        out.write(f"{node} ")
        order.append(node)
    out.write("\n")
    return order

def run_evaluation(args):
    """Run evaluate mode"""
    num_nodes = 50 if args.num_nodes is None else args.num_nodes
    print(f"Checking BFS on {args.num_graphs} random graphs with {num_nodes} nodes...")

    results, summary = evaluate_random_graphs(
        num_graphs=args.num_graphs,
        num_vertices=num_nodes,
        edge_prob=args.edge_prob,
        seed=args.seed,
    )

    for name, rate in summary['pass_rate'].items():
        print(f"{name}: {rate:.0%}")
    print(f"Average nodes visited: {summary['avg_visited']:.1f}")
    print(f"Average time: {summary['avg_time'] * 1000:.3f}ms")

    return results, summary

def main(argv=None):
    """Main function"""
    args = parse_args(argv)

    # Set random seed
    torch.manual_seed(args.seed)
    np.random.seed(args.seed)
    random.seed(args.seed)

    try:
        if args.mode == 'evaluate':
            _, summary = run_evaluation(args)
            return 0 if summary['all_passed'] else 1

        data, start = load_input(args)
        order = run_traversal(data, start)

        if args.mode == 'visualize':
            visualize_traversal(data, order, output_dir=args.plot_dir)

    except InvalidInputError as e:
        print(f"Error: invalid input: {e}", file=sys.stderr)
        return 1
    except InvalidArgumentError as e:
        print(f"Error: invalid argument: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
