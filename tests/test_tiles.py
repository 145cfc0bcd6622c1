import numpy as np
import pytest

from garden.errors import SizeMismatch
from garden.tiles import Grid, Tile, empty_tile, index_of, row_col


def test_index_is_row_major():
    assert index_of(0, 0, 4) == 0
    assert index_of(0, 3, 4) == 3
    assert index_of(1, 0, 4) == 4
    assert index_of(3, 3, 4) == 15
    assert row_col(index_of(2, 1, 5), 5) == (2, 1)


def test_new_grid_is_all_empty():
    grid = Grid(3)
    assert len(grid) == 9
    assert grid.tiles() == [empty_tile()] * 9
    assert grid.planted_count() == 0


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        Grid(0)


def test_set_tile_and_read_back():
    grid = Grid(4)
    grid.set_tile(2, 3, Tile(55.0, True))
    assert grid.tile(2, 3) == Tile(55.0, True)
    assert grid.tile_at(11) == Tile(55.0, True)
    assert grid.planted_count() == 1
    assert grid.bloom_count() == 0


def test_clear_empties_everything():
    grid = Grid(2)
    grid.set_tile(0, 1, Tile(80.0, True))
    grid.clear()
    assert not grid.planted.any()
    assert np.all(grid.growth == 0)


def test_from_tiles_with_mismatched_count_is_empty():
    tiles = [Tile(50.0, True)] * 15
    grid = Grid.from_tiles(4, tiles)
    assert len(grid) == 16
    assert grid.tiles() == [empty_tile()] * 16


def test_from_tiles_strict_raises():
    with pytest.raises(SizeMismatch) as exc:
        Grid.from_tiles(4, [empty_tile()] * 15, strict=True)
    assert exc.value.count == 15


def test_from_tiles_repairs_growth_on_unplanted():
    tiles = [Tile(30.0, False), Tile(150.0, True), Tile(-3.0, True), Tile(0.0, True)]
    grid = Grid.from_tiles(2, tiles)
    assert grid.tiles() == [Tile(0.0, False), Tile(100.0, True), Tile(0.0, True), Tile(0.0, True)]


def test_bloom_count():
    grid = Grid(2)
    grid.set_tile(0, 0, Tile(70.0, True))
    grid.set_tile(0, 1, Tile(69.9, True))
    grid.set_tile(1, 0, Tile(100.0, True))
    assert grid.bloom_count() == 2
