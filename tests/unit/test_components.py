from cellextension.board.board_state import BoardState
from cellextension.board.components import (
    connected_components,
    edge_count,
    internal_adjacency_count,
    internal_edges,
    total_edge_count,
)


class TestConnectedComponents:

    def test_no_cells(self):
        assert connected_components(BoardState.empty(3, 3), 0) == []

    def test_singletons(self):
        board = BoardState.from_cells(3, 3, cells0=[(0, 0), (2, 2), (1, 1)])
        components = connected_components(board, 0)
        assert len(components) == 3
        assert all(len(c) == 1 for c in components)

    def test_diagonal_cells_are_not_connected(self):
        board = BoardState.from_cells(2, 2, cells0=[(0, 0), (1, 1)])
        assert len(connected_components(board, 0)) == 2

    def test_l_shape(self):
        cells = [(0, 0), (0, 1), (0, 2), (1, 2)]
        board = BoardState.from_cells(3, 3, cells0=cells, cells1=[(1, 1)])
        components = connected_components(board, 0)
        assert components == [frozenset(cells)]

    def test_opponent_cells_split_components(self):
        board = BoardState.from_cells(3, 1, cells0=[(0, 0), (2, 0)], cells1=[(1, 0)])
        assert len(connected_components(board, 0)) == 2
        assert connected_components(board, 1) == [frozenset({(1, 0)})]

    def test_row_major_order(self):
        """Components are ordered by their first cell in row-major order"""
        board = BoardState.from_cells(4, 3, cells0=[(3, 2), (0, 1), (2, 0), (3, 0)])
        components = connected_components(board, 0)
        assert components[0] == frozenset({(2, 0), (3, 0)})
        assert components[1] == frozenset({(0, 1)})
        assert components[2] == frozenset({(3, 2)})

    def test_partition(self, random_boards):
        """Components cover the player's cells exactly and never overlap"""
        for board in random_boards:
            for player in (0, 1):
                components = connected_components(board, player)
                union = set()
                for component in components:
                    assert not (union & component)
                    union |= component
                assert union == set(board.occupied[player])

    def test_recomputed_after_placement(self):
        board = BoardState.from_cells(3, 1, cells0=[(0, 0), (2, 0)])
        assert len(connected_components(board, 0)) == 2
        board = board.place_cell(0, (1, 0))
        assert len(connected_components(board, 0)) == 1


class TestEdges:

    def test_square_block(self):
        block = frozenset({(0, 0), (1, 0), (0, 1), (1, 1)})
        assert len(internal_edges(block)) == 4
        assert internal_adjacency_count(block) == 8
        assert edge_count(block) == 4

    def test_line(self):
        line = frozenset({(0, 0), (1, 0), (2, 0)})
        assert internal_edges(line) == {((0, 0), (1, 0)), ((1, 0), (2, 0))}
        assert edge_count(line) == 2

    def test_singleton(self):
        assert edge_count(frozenset({(3, 3)})) == 0
        assert internal_edges(frozenset({(3, 3)})) == set()

    def test_deduplicated_edges_equal_halved_adjacency(self, random_boards):
        for board in random_boards:
            for component in connected_components(board, 0):
                assert len(internal_edges(component)) == internal_adjacency_count(component) // 2

    def test_total_edge_count(self):
        board = BoardState.from_cells(
            4, 2, cells0=[(0, 0), (1, 0), (3, 0), (3, 1)], cells1=[(2, 0)]
        )
        assert total_edge_count(board, 0) == 2
        assert total_edge_count(board, 1) == 0
