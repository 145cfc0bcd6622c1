"""Garden: tile grid, growth ticks, plant/harvest, persistence and the session that owns them."""

from garden.constants import GRID_DEFAULT, TICK_MS
from garden.growth import Stage, stage_of, tick
from garden.persistence import Found, NotFound, PersistenceGateway, SaveResult
from garden.planting import toggle_plant
from garden.session import GardenSession
from garden.tiles import Grid, Tile, empty_tile, index_of

__all__ = [
    "GRID_DEFAULT",
    "TICK_MS",
    "Stage",
    "stage_of",
    "tick",
    "Found",
    "NotFound",
    "PersistenceGateway",
    "SaveResult",
    "toggle_plant",
    "GardenSession",
    "Grid",
    "Tile",
    "empty_tile",
    "index_of",
]
