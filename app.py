"""
App shell: window and event loop. Growth is tick-driven by a pygame timer
(TICK_MS, independent of frame rate). Session, UI and settings are wired here.

Controls: click a tile to plant/harvest, Space pause/resume, R reset,
S randomize, Esc quit.
"""

import logging

import pygame

import config
from garden import GardenSession, PersistenceGateway
from garden.seed_util import make_rng
from ui.grid_view import draw_grid, tile_at_pos
from ui.ticker import PygameTicker
from ui.tooltips import draw_tooltip, tile_tooltip

TITLE = "PixelGarden"
STATUS_HEIGHT = 28
MARGIN = 12
BACKGROUND = (4, 12, 18)
STATUS_COLOR = (190, 200, 200)
FONT_SIZE = 18

logger = logging.getLogger(__name__)


def build_session(settings: dict, directory=None) -> GardenSession:
    rng, seed_used = make_rng(settings["seed"])
    logger.debug("rng seed %d", seed_used)
    gateway = PersistenceGateway(config.state_store(settings, directory))
    session = GardenSession(gateway, rng)
    if session.initialize(settings["grid_size"]):
        logger.info("restored %dx%d garden", session.size, session.size)
    return session


def _status_text(session: GardenSession) -> str:
    state = "running" if session.running else "paused"
    saved = "" if session.last_save is None or session.last_save.ok else "  (not saved)"
    return (
        f"{state}  tick {session.ticks}  planted {session.grid.planted_count()}"
        f"  blooms {session.grid.bloom_count()}{saved}"
    )


def run(directory=None) -> None:
    settings = config.load_settings(directory)
    logging.basicConfig(
        level=getattr(logging, str(settings["log_level"]).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    session = build_session(settings, directory)

    pygame.init()
    grid_px = settings["tile_size"] * session.size
    width = grid_px + 2 * MARGIN
    height = grid_px + 2 * MARGIN + STATUS_HEIGHT
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, FONT_SIZE)

    ticker = PygameTicker()
    session.start(ticker, settings["tick_ms"])

    running = True
    while running:
        clock.tick(60)
        grid_rect = pygame.Rect(MARGIN, MARGIN, grid_px, grid_px)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if ticker.handle_event(event):
                continue
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                cell = tile_at_pos(grid_rect, session.size, event.pos)
                if cell is not None:
                    session.on_user_toggle(*cell)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    session.toggle_running()
                elif event.key == pygame.K_r:
                    session.reset()
                elif event.key == pygame.K_s:
                    session.randomize_seed(settings["random_chance"])
                elif event.key == pygame.K_ESCAPE:
                    running = False

        mouse = pygame.mouse.get_pos()
        hover = tile_at_pos(grid_rect, session.size, mouse)
        screen.fill(BACKGROUND)
        draw_grid(screen, grid_rect, session.grid, hover=hover)
        status = font.render(_status_text(session), True, STATUS_COLOR)
        screen.blit(status, (MARGIN, grid_rect.bottom + 8))
        if hover is not None:
            draw_tooltip(screen, font, tile_tooltip(session.grid.tile(*hover)), mouse)
        pygame.display.flip()

    session.stop()
    pygame.quit()


if __name__ == "__main__":
    run()
