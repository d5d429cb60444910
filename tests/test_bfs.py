"""Tests for the breadth-first traversal core."""
import numpy as np
import pytest
import torch

from traversal import iter_bfs, bfs_order, bfs_layers, bfs_adj_list, InvalidArgumentError


def path_matrix(n):
    matrix = np.zeros((n, n), dtype=bool)
    for i in range(n - 1):
        matrix[i, i + 1] = matrix[i + 1, i] = True
    return matrix


class TestBFSOrder:

    def test_single_vertex(self):
        assert bfs_order([[0]], 0) == [0]

    def test_disconnected_vertex_never_visited(self):
        matrix = [[0, 1, 0],
                  [1, 0, 0],
                  [0, 0, 0]]
        assert bfs_order(matrix, 0) == [0, 1]
        assert bfs_order(matrix, 2) == [2]

    def test_complete_graph_ascending_tie_break(self):
        matrix = np.ones((4, 4), dtype=int) - np.eye(4, dtype=int)
        assert bfs_order(matrix, 0) == [0, 1, 2, 3]
        assert bfs_order(matrix, 2) == [2, 0, 1, 3]

    def test_layers_before_index_order(self):
        # 0-3, 3-1, 0-2: vertex 1 is two hops away and comes after 2
        matrix = np.zeros((4, 4), dtype=bool)
        for u, v in [(0, 3), (3, 1), (0, 2)]:
            matrix[u, v] = matrix[v, u] = True
        assert bfs_order(matrix, 0) == [0, 2, 3, 1]

    def test_path_from_middle(self):
        assert bfs_order(path_matrix(5), 2) == [2, 1, 3, 0, 4]

    def test_cycle_visits_each_vertex_once(self):
        matrix = path_matrix(4)
        matrix[0, 3] = matrix[3, 0] = True
        order = bfs_order(matrix, 0)
        assert sorted(order) == [0, 1, 2, 3]
        assert order == [0, 1, 3, 2]

    def test_self_loop_ignored(self):
        matrix = [[1, 1],
                  [1, 0]]
        assert bfs_order(matrix, 0) == [0, 1]

    def test_idempotent_and_matrix_untouched(self):
        matrix = path_matrix(6)
        before = matrix.copy()
        assert bfs_order(matrix, 3) == bfs_order(matrix, 3)
        assert np.array_equal(matrix, before)

    def test_accepts_torch_tensor(self):
        matrix = torch.tensor(path_matrix(3), dtype=torch.long)
        assert bfs_order(matrix, 0) == [0, 1, 2]

    def test_numpy_integer_start(self):
        assert bfs_order(path_matrix(3), np.int64(1)) == [1, 0, 2]


class TestInvalidArguments:

    @pytest.mark.parametrize('start', [-1, 3, 100])
    def test_start_out_of_range(self, start):
        with pytest.raises(InvalidArgumentError):
            bfs_order(path_matrix(3), start)

    @pytest.mark.parametrize('start', [True, 1.0, '1', None])
    def test_start_not_an_index(self, start):
        with pytest.raises(InvalidArgumentError):
            bfs_order(path_matrix(3), start)

    def test_non_square_matrix(self):
        with pytest.raises(InvalidArgumentError):
            bfs_order([[0, 1, 0], [1, 0, 0]], 0)

    def test_empty_matrix(self):
        with pytest.raises(InvalidArgumentError):
            bfs_order(np.zeros((0, 0)), 0)

    def test_invalid_start_fails_before_iteration(self):
        # The error comes from the call itself, not from the first next()
        with pytest.raises(InvalidArgumentError):
            iter_bfs(path_matrix(3), 5)

    def test_invalid_ragged_matrix(self):
        with pytest.raises(InvalidArgumentError):
            bfs_order([[0, 1], [1]], 0)


class TestStreaming:

    def test_yields_incrementally(self):
        nodes = iter_bfs(path_matrix(4), 0)
        assert next(nodes) == 0
        assert next(nodes) == 1
        assert list(nodes) == [2, 3]


class TestLayers:

    def test_distances(self):
        levels = bfs_layers(path_matrix(4), 0)
        assert levels == {0: 0, 1: 1, 2: 2, 3: 3}

    def test_order_matches_bfs_order(self):
        matrix = np.ones((5, 5), dtype=bool)
        assert list(bfs_layers(matrix, 4)) == bfs_order(matrix, 4)

    def test_unreachable_missing(self):
        matrix = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
        assert 2 not in bfs_layers(matrix, 0)


class TestAdjacencyList:

    def test_unsorted_neighbors_follow_ascending_order(self):
        adj_list = {0: [3, 1, 2], 1: [0], 2: [0], 3: [0]}
        assert bfs_adj_list(adj_list, 4, 0) == [0, 1, 2, 3]

    def test_matches_matrix(self):
        matrix = path_matrix(5)
        matrix[0, 4] = matrix[4, 0] = True
        adj_list = {i: np.flatnonzero(matrix[i]).tolist()[::-1] for i in range(5)}
        for start in range(5):
            assert bfs_adj_list(adj_list, 5, start) == bfs_order(matrix, start)

    def test_missing_vertex_entry(self):
        assert bfs_adj_list({}, 3, 1) == [1]

    def test_out_of_range_neighbors_skipped(self):
        adj_list = {0: [-1, 5, 1], 1: [0, -2]}
        assert bfs_adj_list(adj_list, 2, 0) == [0, 1]

    def test_start_out_of_range(self):
        with pytest.raises(InvalidArgumentError):
            bfs_adj_list({0: []}, 1, 1)
