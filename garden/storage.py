"""
Key-value stores for persisted state. get() returns None when absent or
unreadable; set() returns False on failure instead of raising.
"""

import logging
import os
import re
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> bool: ...


class MemoryStore:
    """In-process store. fail_writes models a full or unavailable backend."""

    def __init__(self, initial: Optional[dict[str, str]] = None, fail_writes: bool = False) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.fail_writes = fail_writes

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        if self.fail_writes:
            return False
        self.data[key] = value
        return True


def _sanitize_key(key: str) -> str:
    s = (key or "").strip()
    s = re.sub(r"[^\w\s-]", "", s)
    s = re.sub(r"[\s-]+", "_", s).strip("_")
    return s[:64] or "unnamed"


class FileStore:
    """One JSON file per key in a directory. Writes are atomic via a temp file."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{_sanitize_key(key)}.json"

    def get(self, key: str) -> Optional[str]:
        p = self.path_for(key)
        if not p.exists():
            return None
        try:
            return p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("could not read %s: %s", p, e)
            return None

    def set(self, key: str, value: str) -> bool:
        target = self.path_for(key)
        tmp = target.with_suffix(".json.tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, target)
        except OSError as e:
            logger.warning("could not write %s: %s", target, e)
            return False
        return True
