"""UI: tile grid view, tooltips and the pygame tick source."""

from ui.grid_view import draw_grid, tile_at_pos
from ui.colors import tiles_to_rgb
from ui.ticker import PygameTicker

__all__ = ["draw_grid", "tile_at_pos", "tiles_to_rgb", "PygameTicker"]
