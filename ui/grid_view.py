"""Garden panel: one rounded tile per cell, sized and colored by growth stage."""

from typing import Optional

import pygame

from garden.constants import GROWING_MAX
from garden.tiles import Grid, row_col
from ui.colors import BACKGROUND, scale_factors, tiles_to_rgb

BORDER_COLOR = (80, 80, 80)
BORDER_PX = 1
TILE_GAP = 2
TILE_RADIUS = 6
BLOOM_DOT = (255, 236, 190)
HOVER_OUTLINE = (200, 200, 200)
MAX_TILE_SCALE = 1.2


def cell_size(rect: pygame.Rect, size: int) -> int:
    return max(1, min(rect.width, rect.height) // size)


def tile_at_pos(rect: pygame.Rect, size: int, pos: tuple[int, int]) -> Optional[tuple[int, int]]:
    """(row, col) under a screen position, or None outside the grid."""
    cell = cell_size(rect, size)
    x, y = pos[0] - rect.x, pos[1] - rect.y
    if x < 0 or y < 0:
        return None
    row, col = y // cell, x // cell
    if row >= size or col >= size:
        return None
    return int(row), int(col)


def draw_grid(
    surface: pygame.Surface,
    rect: pygame.Rect,
    grid: Grid,
    hover: Optional[tuple[int, int]] = None,
) -> None:
    """Draw every tile into rect. Planted tiles scale with growth, capped at MAX_TILE_SCALE."""
    size = grid.size
    cell = cell_size(rect, size)
    rgb = tiles_to_rgb(grid.growth, grid.planted)
    scale = scale_factors(grid.growth, grid.planted)
    surface.fill(BACKGROUND, rect)
    inner = max(1, cell - TILE_GAP)
    # Empty tiles first so scaled plants draw on top of their neighbours.
    order = sorted(range(len(grid)), key=lambda i: scale[i])
    for idx in order:
        row, col = row_col(idx, size)
        side = max(1, int(inner * min(scale[idx], MAX_TILE_SCALE)))
        cx = rect.x + col * cell + cell // 2
        cy = rect.y + row * cell + cell // 2
        tile_rect = pygame.Rect(0, 0, side, side)
        tile_rect.center = (cx, cy)
        color = tuple(int(c) for c in rgb[idx])
        pygame.draw.rect(surface, color, tile_rect, border_radius=TILE_RADIUS)
        if grid.planted[idx] and grid.growth[idx] >= GROWING_MAX:
            pygame.draw.circle(surface, BLOOM_DOT, (cx, cy - side // 10), max(2, side // 6))
    if hover is not None:
        hr, hc = hover
        pygame.draw.rect(
            surface,
            HOVER_OUTLINE,
            (rect.x + hc * cell, rect.y + hr * cell, cell, cell),
            1,
            border_radius=TILE_RADIUS,
        )
    pygame.draw.rect(surface, BORDER_COLOR, (rect.x, rect.y, cell * size, cell * size), BORDER_PX)
