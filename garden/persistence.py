"""
Persisted payload codec and the save/load gateway.

Stored value (JSON): {"version": 1, "size": int, "tiles": [{"growth": float,
"planted": bool}, ...], "timestamp": int ms}. The legacy shape without
"version" is accepted. save() and load() never raise: save returns a
SaveResult, load degrades to NotFound.
"""

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence, Union

from garden.constants import EMPTY_GROWTH, GRID_DEFAULT, MAX_GRID, MAX_GROWTH, SCHEMA_VERSION, STATE_KEY
from garden.errors import MalformedPayload, StorageUnavailable
from garden.storage import KeyValueStore
from garden.tiles import Tile

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Payload:
    size: int
    tiles: list[Tile] = field(default_factory=list)
    timestamp: int = 0
    version: int = SCHEMA_VERSION


@dataclass(frozen=True)
class Found:
    payload: Payload


@dataclass(frozen=True)
class NotFound:
    reason: str = "missing"


LoadResult = Union[Found, NotFound]


@dataclass(frozen=True)
class SaveResult:
    ok: bool
    error: Optional[str] = None


def encode_payload(size: int, tiles: Sequence[Tile], timestamp: int) -> str:
    out = {
        "version": SCHEMA_VERSION,
        "size": int(size),
        "tiles": [{"growth": float(t.growth), "planted": bool(t.planted)} for t in tiles],
        "timestamp": int(timestamp),
    }
    return json.dumps(out, allow_nan=False, separators=(",", ":"))


def _decode_tile(raw: Any) -> Tile:
    if not isinstance(raw, dict):
        raise MalformedPayload(f"tile entry is {type(raw).__name__}, not an object")
    planted = raw.get("planted", False)
    if not isinstance(planted, bool):
        raise MalformedPayload(f"bad planted value {planted!r}")
    try:
        growth = float(raw.get("growth", EMPTY_GROWTH))
    except (TypeError, ValueError, OverflowError) as e:
        raise MalformedPayload(f"bad growth value {raw.get('growth')!r}") from e
    if growth != growth:  # NaN
        raise MalformedPayload("growth is NaN")
    growth = min(MAX_GROWTH, max(EMPTY_GROWTH, growth))
    return Tile(growth if planted else EMPTY_GROWTH, planted)


def _migrate(data: dict) -> dict:
    """Bring a decoded dict to SCHEMA_VERSION. Unversioned legacy data is version 0."""
    try:
        version = int(data.get("version", 0))
    except (TypeError, ValueError, OverflowError) as e:
        raise MalformedPayload(f"bad version {data.get('version')!r}") from e
    if version > SCHEMA_VERSION:
        raise MalformedPayload(f"unsupported version {version}")
    # 0 -> 1: same fields, version added.
    data["version"] = SCHEMA_VERSION
    return data


def decode_payload(text: str) -> Payload:
    """Parse a stored value. Raises MalformedPayload; tile count is not checked here."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise MalformedPayload(f"not JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedPayload("payload is not an object")
    tiles = data.get("tiles")
    if not isinstance(tiles, list):
        raise MalformedPayload("missing tiles")
    data = _migrate(data)
    try:
        size = int(data.get("size", GRID_DEFAULT))
        timestamp = int(data.get("timestamp", 0))
    except (TypeError, ValueError, OverflowError) as e:
        raise MalformedPayload(str(e)) from e
    if not 1 <= size <= MAX_GRID:
        raise MalformedPayload(f"bad size {size}")
    return Payload(
        size=size,
        tiles=[_decode_tile(t) for t in tiles],
        timestamp=timestamp,
        version=data["version"],
    )


class PersistenceGateway:
    """Best-effort bridge between a session's grid and a key-value store. Holds no state copy."""

    def __init__(
        self,
        store: KeyValueStore,
        key: str = STATE_KEY,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.store = store
        self.key = key
        self.clock = clock

    def save(self, size: int, tiles: Sequence[Tile]) -> SaveResult:
        try:
            text = encode_payload(size, tiles, self.clock())
            if not self.store.set(self.key, text):
                raise StorageUnavailable(f"store rejected write for {self.key!r}")
        except (OSError, TypeError, ValueError, StorageUnavailable) as e:
            logger.warning("save skipped: %s", e)
            return SaveResult(False, str(e))
        return SaveResult(True)

    def load(self) -> LoadResult:
        try:
            text = self.store.get(self.key)
        except OSError as e:
            logger.warning("load failed, storage unreadable: %s", e)
            return NotFound("unreadable")
        if text is None:
            logger.info("no saved garden under %r", self.key)
            return NotFound("missing")
        try:
            payload = decode_payload(text)
        except MalformedPayload as e:
            logger.warning("ignoring saved garden: %s", e)
            return NotFound(f"malformed: {e}")
        logger.debug("loaded garden size=%d tiles=%d", payload.size, len(payload.tiles))
        return Found(payload)
