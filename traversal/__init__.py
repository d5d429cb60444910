from traversal.bfs import iter_bfs, bfs_order, bfs_layers, bfs_adj_list
from traversal.errors import InvalidArgumentError, InvalidInputError

__all__ = [
    'iter_bfs',
    'bfs_order',
    'bfs_layers',
    'bfs_adj_list',
    'InvalidArgumentError',
    'InvalidInputError',
]
