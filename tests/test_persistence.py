import json

import pytest

from garden.constants import GRID_DEFAULT, MAX_GRID, SCHEMA_VERSION, STATE_KEY
from garden.errors import MalformedPayload
from garden.persistence import (
    Found,
    NotFound,
    PersistenceGateway,
    decode_payload,
    encode_payload,
)
from garden.storage import MemoryStore
from garden.tiles import Tile


class ExplodingStore:
    def get(self, key):
        raise OSError("disk gone")

    def set(self, key, value):
        raise OSError("disk gone")


def test_save_writes_versioned_payload(gateway, store):
    tiles = [Tile(4.0, True), Tile(0.0, False), Tile(71.25, True), Tile(0.0, False)]
    result = gateway.save(2, tiles)
    assert result.ok and result.error is None
    data = json.loads(store.data[STATE_KEY])
    assert data["version"] == SCHEMA_VERSION
    assert data["size"] == 2
    assert data["timestamp"] == 1_700_000_000_000
    assert data["tiles"][2] == {"growth": 71.25, "planted": True}


def test_round_trip_preserves_size_and_tiles(gateway, rng):
    tiles = [Tile(float(g), True) if g > 30 else Tile(0.0, False) for g in rng.random(25) * 100]
    gateway.save(5, tiles)
    result = gateway.load()
    assert isinstance(result, Found)
    assert result.payload.size == 5
    assert result.payload.tiles == tiles


def test_load_missing_entry(gateway):
    assert gateway.load() == NotFound("missing")


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        "[1, 2, 3]",
        '{"size": 4}',
        '{"size": 4, "tiles": "nope"}',
        '{"size": 4, "tiles": [1, 2]}',
        '{"size": 0, "tiles": []}',
        '{"version": 99, "size": 1, "tiles": [{"growth": 0, "planted": false}]}',
        '{"size": 1, "tiles": [], "timestamp": 1e999}',
        '{"size": 1e999, "tiles": []}',
        '{"version": 1e999, "size": 1, "tiles": []}',
        '{"size": 1, "tiles": [{"growth": 1' + "0" * 400 + ', "planted": true}]}',
        '{"size": 10000000, "tiles": []}',
        '{"size": 1, "tiles": [{"growth": 5, "planted": "false"}]}',
    ],
)
def test_load_malformed_degrades_to_not_found(raw):
    gw = PersistenceGateway(MemoryStore({STATE_KEY: raw}))
    result = gw.load()
    assert isinstance(result, NotFound)
    assert result.reason.startswith("malformed")


def test_legacy_unversioned_payload_is_accepted():
    legacy = {"size": 1, "tiles": [{"growth": 12.5, "planted": True}], "timestamp": 5}
    gw = PersistenceGateway(MemoryStore({STATE_KEY: json.dumps(legacy)}))
    result = gw.load()
    assert isinstance(result, Found)
    assert result.payload.version == SCHEMA_VERSION
    assert result.payload.tiles == [Tile(12.5, True)]
    assert result.payload.timestamp == 5


def test_missing_size_defaults():
    payload = decode_payload('{"tiles": []}')
    assert payload.size == GRID_DEFAULT


def test_decode_clamps_and_repairs_tiles():
    text = json.dumps(
        {
            "size": 2,
            "tiles": [
                {"growth": 40, "planted": False},
                {"growth": 250, "planted": True},
                {"growth": -5, "planted": True},
                {},
            ],
        }
    )
    assert decode_payload(text).tiles == [
        Tile(0.0, False),
        Tile(100.0, True),
        Tile(0.0, True),
        Tile(0.0, False),
    ]


def test_decode_rejects_non_numeric_growth():
    with pytest.raises(MalformedPayload):
        decode_payload('{"size": 1, "tiles": [{"growth": "lots", "planted": true}]}')


def test_encode_rejects_nan():
    with pytest.raises(ValueError):
        encode_payload(1, [Tile(float("nan"), True)], 0)


def test_save_failure_is_reported_not_raised():
    gw = PersistenceGateway(MemoryStore(fail_writes=True))
    result = gw.save(1, [Tile()])
    assert not result.ok
    assert "rejected" in result.error


def test_store_exceptions_never_escape():
    gw = PersistenceGateway(ExplodingStore())
    assert not gw.save(1, [Tile()]).ok
    assert gw.load() == NotFound("unreadable")


def test_largest_allowed_size_still_loads():
    payload = decode_payload(json.dumps({"size": MAX_GRID, "tiles": []}))
    assert payload.size == MAX_GRID
    with pytest.raises(MalformedPayload):
        decode_payload(json.dumps({"size": MAX_GRID + 1, "tiles": []}))


def test_infinite_growth_is_clamped():
    payload = decode_payload('{"size": 1, "tiles": [{"growth": 1e999, "planted": true}]}')
    assert payload.tiles == [Tile(100.0, True)]


def test_planted_must_be_boolean():
    with pytest.raises(MalformedPayload):
        decode_payload('{"size": 1, "tiles": [{"growth": 5, "planted": 1}]}')
