import numpy as np
import pytest

from cellextension.board.position import (
    adjacent_in_bounds,
    adjacent_positions,
    decode,
    edge_key,
    encode,
    is_adjacent,
    is_valid_position,
    neighbors8,
)


class TestBounds:

    def test_inside(self):
        assert is_valid_position(0, 0, 3, 2)
        assert is_valid_position(2, 1, 3, 2)

    def test_outside(self):
        assert not is_valid_position(-1, 0, 3, 2)
        assert not is_valid_position(3, 0, 3, 2)
        assert not is_valid_position(0, 2, 3, 2)


class TestAdjacency:

    def test_adjacent_positions_unfiltered(self):
        """Corner neighbours include off-grid coordinates"""
        neighbors = adjacent_positions(0, 0)
        assert len(neighbors) == 4
        assert set(neighbors) == {(1, 0), (-1, 0), (0, 1), (0, -1)}

    def test_adjacent_in_bounds(self):
        assert set(adjacent_in_bounds(0, 0, 3, 3)) == {(1, 0), (0, 1)}
        assert len(adjacent_in_bounds(1, 1, 3, 3)) == 4

    def test_neighbors8(self):
        assert len(neighbors8(1, 1, 3, 3)) == 8
        assert set(neighbors8(0, 0, 3, 3)) == {(1, 0), (0, 1), (1, 1)}
        assert neighbors8(0, 0, 1, 1) == []

    def test_is_adjacent(self):
        assert is_adjacent((1, 1), (1, 2))
        assert not is_adjacent((1, 1), (2, 2))
        assert not is_adjacent((1, 1), (1, 1))


class TestKeys:

    def test_encode(self):
        assert encode(3, 4) == "3-4"
        assert encode(10, 0) == "10-0"

    def test_decode(self):
        assert decode("3-4") == (3, 4)
        assert decode("10-0") == (10, 0)

    def test_bijection(self):
        """Every position maps to a unique key and back"""
        keys = set()
        for x in range(-2, 12):
            for y in range(-2, 12):
                key = encode(x, y)
                assert decode(key) == (x, y)
                keys.add(key)
        assert len(keys) == 14 * 14

    def test_numpy_integers_encode_identically(self):
        assert encode(np.int64(2), np.int32(5)) == encode(2, 5)

    def test_rejects_non_integer_coordinates(self):
        with pytest.raises(TypeError):
            encode(1.0, 2)
        with pytest.raises(TypeError):
            encode(True, 2)

    @pytest.mark.parametrize("key", ["", "3", "3-", "-4", "a-b", "3-4-5", "3.0-4", " 3-4"])
    def test_decode_malformed(self, key):
        with pytest.raises(ValueError):
            decode(key)

    def test_edge_key_is_order_independent(self):
        assert edge_key((0, 0), (1, 0)) == edge_key((1, 0), (0, 0)) == "0-0<->1-0"
