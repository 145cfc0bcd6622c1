"""
Garden session: owns the grid, the running flag and the tick source, and is
the only mutator of garden state. Every mutation is followed by a
best-effort save whose SaveResult is kept on last_save.
"""

import logging
from typing import Optional

import numpy as np

from garden.constants import (
    EMPTY_GROWTH,
    GRID_DEFAULT,
    RANDOM_CHANCE,
    RANDOM_GROWTH_SPAN,
    RANDOM_MIN_GROWTH,
    TICK_MS,
)
from garden.errors import SizeMismatch
from garden.growth import tick
from garden.persistence import Found, PersistenceGateway, SaveResult
from garden.planting import toggle_plant
from garden.scheduler import Ticker
from garden.tiles import Grid, Tile

logger = logging.getLogger(__name__)


class GardenSession:
    """Running/Paused state machine over one grid. Starts Running."""

    def __init__(
        self,
        gateway: PersistenceGateway,
        rng: np.random.Generator,
        size: int = GRID_DEFAULT,
    ) -> None:
        self.gateway = gateway
        self.rng = rng
        self.grid = Grid(size)
        self.running = True
        self.ticks = 0
        self.last_save: Optional[SaveResult] = None
        self._ticker: Optional[Ticker] = None

    @property
    def size(self) -> int:
        return self.grid.size

    def initialize(self, requested_size: Optional[int] = None) -> bool:
        """Load saved state or start empty. Returns True when a save was adopted."""
        result = self.gateway.load()
        if isinstance(result, Found):
            payload = result.payload
            try:
                self.grid = Grid.from_tiles(payload.size, payload.tiles, strict=True)
            except SizeMismatch as e:
                logger.warning("saved garden discarded: %s", e)
                self.grid = Grid(payload.size)
            return True
        self.grid = Grid(requested_size or GRID_DEFAULT)
        return False

    def save(self) -> SaveResult:
        self.last_save = self.gateway.save(self.grid.size, self.grid.tiles())
        return self.last_save

    def on_user_toggle(self, row: int, col: int) -> Tile:
        tile = toggle_plant(self.grid, row, col)
        self.save()
        return tile

    def on_tick(self) -> bool:
        """Advance growth when running. Paused ticks are no-ops."""
        if not self.running:
            return False
        tick(self.grid, self.rng)
        self.ticks += 1
        self.save()
        return True

    def toggle_running(self) -> bool:
        self.running = not self.running
        logger.debug("garden %s", "running" if self.running else "paused")
        return self.running

    def reset(self) -> None:
        self.grid.clear()
        logger.info("garden reset at size %d", self.grid.size)
        self.save()

    def randomize_seed(self, chance: float = RANDOM_CHANCE) -> None:
        """Overwrite every tile: planted with probability chance, else empty."""
        if not 0.0 <= chance <= 1.0:
            raise ValueError(f"chance must be in [0, 1], got {chance}")
        n = len(self.grid)
        planted = self.rng.random(n) < chance
        growth = RANDOM_MIN_GROWTH + self.rng.random(n) * RANDOM_GROWTH_SPAN
        self.grid.planted[:] = planted
        self.grid.growth[:] = np.where(planted, growth, EMPTY_GROWTH)
        logger.info("garden randomized: %d/%d planted", int(np.count_nonzero(planted)), n)
        self.save()

    def new_grid(self, size: int) -> None:
        """Replace the grid with an empty one of the given size."""
        self.grid = Grid(size)
        self.save()

    def start(self, ticker: Ticker, interval_ms: int = TICK_MS) -> None:
        """Install a tick source, cancelling any previous one first."""
        self.stop()
        self._ticker = ticker
        ticker.start(interval_ms, self.on_tick)

    def stop(self) -> None:
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None
