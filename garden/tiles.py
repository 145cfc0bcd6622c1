"""Square grid of tiles. Flat row-major arrays: index = row * size + col."""

from typing import Iterable, NamedTuple

import numpy as np

from garden.constants import EMPTY_GROWTH, GROWING_MAX, MAX_GROWTH
from garden.errors import SizeMismatch


class Tile(NamedTuple):
    growth: float = EMPTY_GROWTH
    planted: bool = False


def empty_tile() -> Tile:
    return Tile(EMPTY_GROWTH, False)


def index_of(row: int, col: int, size: int) -> int:
    """Row-major index. Callers guarantee 0 <= row, col < size."""
    return row * size + col


def row_col(index: int, size: int) -> tuple[int, int]:
    return divmod(int(index), size)


class Grid:
    """Growth and planted flags per tile; length is always size * size."""

    __slots__ = ("size", "growth", "planted")

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"grid size must be >= 1, got {size}")
        self.size = int(size)
        self.growth = np.zeros(self.size * self.size, dtype=np.float64)
        self.planted = np.zeros(self.size * self.size, dtype=bool)

    def __len__(self) -> int:
        return self.growth.size

    def tile_at(self, index: int) -> Tile:
        return Tile(float(self.growth[index]), bool(self.planted[index]))

    def tile(self, row: int, col: int) -> Tile:
        return self.tile_at(index_of(row, col, self.size))

    def set_tile(self, row: int, col: int, tile: Tile) -> None:
        idx = index_of(row, col, self.size)
        self.growth[idx] = tile.growth
        self.planted[idx] = tile.planted

    def tiles(self) -> list[Tile]:
        return [Tile(float(g), bool(p)) for g, p in zip(self.growth, self.planted)]

    def clear(self) -> None:
        self.growth.fill(EMPTY_GROWTH)
        self.planted.fill(False)

    def planted_count(self) -> int:
        return int(np.count_nonzero(self.planted))

    def bloom_count(self) -> int:
        return int(np.count_nonzero(self.planted & (self.growth >= GROWING_MAX)))

    @classmethod
    def from_tiles(cls, size: int, tiles: Iterable[Tile], strict: bool = False) -> "Grid":
        """
        Adopt a tile sequence. A count that disagrees with size * size yields an
        all-empty grid, or raises SizeMismatch when strict.
        """
        tiles = list(tiles)
        grid = cls(size)
        if len(tiles) != len(grid):
            if strict:
                raise SizeMismatch(grid.size, len(tiles))
            return grid
        for i, t in enumerate(tiles):
            planted = bool(t.planted)
            grid.planted[i] = planted
            grid.growth[i] = min(MAX_GROWTH, max(EMPTY_GROWTH, float(t.growth))) if planted else EMPTY_GROWTH
        return grid
