"""Hover tooltip for tiles: one short line next to the cursor."""

from typing import Optional

import pygame

from garden.growth import Stage, stage_of
from garden.tiles import Tile

TOOLTIP_BG = (28, 28, 32)
TOOLTIP_BORDER = (60, 60, 68)
TOOLTIP_TEXT = (240, 240, 235)
TOOLTIP_PADDING = 6
TOOLTIP_CURSOR_GAP = (12, 8)


def tile_tooltip(tile: Tile) -> str:
    stage = stage_of(tile.growth, tile.planted)
    if stage is Stage.EMPTY:
        return "empty"
    text = f"{stage.value} {round(tile.growth)}%"
    if stage is Stage.BLOOM:
        text += " - click to harvest"
    return text


def tooltip_rect(text_size: tuple[int, int], mouse_pos: tuple[int, int], bounds: tuple[int, int]) -> pygame.Rect:
    """Box below-right of the cursor, flipped to the other side near an edge."""
    w = text_size[0] + 2 * TOOLTIP_PADDING
    h = text_size[1] + 2 * TOOLTIP_PADDING
    gx, gy = TOOLTIP_CURSOR_GAP
    mx, my = mouse_pos
    bw, bh = bounds
    x = mx + gx if mx + gx + w <= bw else mx - gx - w
    y = my + gy if my + gy + h <= bh else my - gy - h
    return pygame.Rect(max(0, min(x, bw - w)), max(0, min(y, bh - h)), w, h)


def draw_tooltip(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: Optional[str],
    mouse_pos: tuple[int, int],
) -> None:
    if not text:
        return
    label = font.render(text, True, TOOLTIP_TEXT)
    rect = tooltip_rect(label.get_size(), mouse_pos, surface.get_size())
    pygame.draw.rect(surface, TOOLTIP_BG, rect)
    pygame.draw.rect(surface, TOOLTIP_BORDER, rect, 1)
    surface.blit(label, (rect.x + TOOLTIP_PADDING, rect.y + TOOLTIP_PADDING))
