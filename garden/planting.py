"""Plant / harvest transition for a single tile."""

from garden.constants import EMPTY_GROWTH, SPROUT_GROWTH
from garden.tiles import Grid, Tile, index_of


def toggle_plant(grid: Grid, row: int, col: int) -> Tile:
    """
    Flip planted. A newly planted tile with zero growth becomes a sprout;
    harvesting always clears growth. Conditions are checked after the flip.
    """
    idx = index_of(row, col, grid.size)
    planted = not bool(grid.planted[idx])
    grid.planted[idx] = planted
    if planted and grid.growth[idx] == EMPTY_GROWTH:
        grid.growth[idx] = SPROUT_GROWTH
    if not planted:
        grid.growth[idx] = EMPTY_GROWTH
    return grid.tile_at(idx)
