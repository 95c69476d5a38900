"""Repository for persisted daily snapshots."""
import json
import logging
import math
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from backend.config import settings

logger = logging.getLogger(__name__)

SNAPSHOT_PREFIX = "tsr:snap"


def round_coordinate(value: float, decimals: int = 3) -> float:
    """Round half-up so keys for nearby requests are stable."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def format_coordinate(value: float) -> str:
    """Shortest text form, integral values without a trailing ``.0``."""
    # -0.0 and 0.0 share a key
    text = repr(float(value) + 0.0)
    return text[:-2] if text.endswith(".0") else text


def snapshot_key(date: str, lat: float, lon: float) -> str:
    """Storage key for one location and day (coordinates already rounded)."""
    return f"{SNAPSHOT_PREFIX}:{date}:{format_coordinate(lat)},{format_coordinate(lon)}"


class SnapshotRepository:
    """
    File-backed key/value store for snapshot records.

    Each key maps to one JSON file. Values are returned decoded; callers
    treat anything unreadable as absent.
    """

    def __init__(self, snapshot_dir: Path = None):
        """Initialize repository with the storage directory."""
        self.snapshot_dir = snapshot_dir or settings.snapshot_dir

    @staticmethod
    def _filename(key: str) -> str:
        return key.replace(":", "__") + ".json"

    @staticmethod
    def _key(path: Path) -> str:
        return path.stem.replace("__", ":")

    def get_path(self, key: str) -> Path:
        return self.snapshot_dir / self._filename(key)

    def get(self, key: str) -> Optional[Any]:
        """Load a stored value, or None when missing or unreadable."""
        path = self.get_path(key)
        if not path.exists():
            return None
        try:
            with open(path, "r") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read snapshot %s: %s", key, e)
            return None

    def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value under ``key`` (atomic replace)."""
        self.snapshot_dir.mkdir(parents=True, exist_ok=True)
        path = self.get_path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.snapshot_dir, suffix=".tmp")
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(value, f)
            tmp_path.replace(path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

    def mget(self, keys: List[str]) -> List[Optional[Any]]:
        """Load several values at once, preserving order."""
        return [self.get(key) for key in keys]

    def scan(self, prefix: str) -> List[str]:
        """All stored keys starting with ``prefix``, sorted."""
        if not self.snapshot_dir.exists():
            return []
        keys = (self._key(p) for p in self.snapshot_dir.glob("*.json"))
        return sorted(k for k in keys if k.startswith(prefix))

    def save_snapshot(self, record: Dict[str, Any]) -> str:
        """Store a snapshot record keyed by its date and coordinates."""
        key = snapshot_key(record["date"], record["lat"], record["lon"])
        self.set(key, record)
        return key

    def load_snapshots(self, dates: List[str], lat: float, lon: float) -> Dict[str, Optional[Any]]:
        """Stored records for several dates at one location."""
        keys = [snapshot_key(d, lat, lon) for d in dates]
        return dict(zip(dates, self.mget(keys)))

    def list_dates(self, lat: float, lon: float) -> List[str]:
        """Dates with a stored snapshot for a location, ascending."""
        suffix = f":{format_coordinate(lat)},{format_coordinate(lon)}"
        return sorted(
            key[len(SNAPSHOT_PREFIX) + 1 : -len(suffix)]
            for key in self.scan(SNAPSHOT_PREFIX + ":")
            if key.endswith(suffix)
        )
