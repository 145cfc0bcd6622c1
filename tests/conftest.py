import numpy as np
import pytest

from garden.persistence import PersistenceGateway
from garden.session import GardenSession
from garden.storage import MemoryStore


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def gateway(store) -> PersistenceGateway:
    return PersistenceGateway(store, clock=lambda: 1_700_000_000_000)


@pytest.fixture
def session(gateway, rng) -> GardenSession:
    """Fresh 4x4 session with nothing saved."""
    s = GardenSession(gateway, rng)
    s.initialize(4)
    return s

