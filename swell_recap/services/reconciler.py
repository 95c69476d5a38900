"""Merging persisted daily summaries with freshly built ones."""
import json
import logging
import math
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from swell_recap.models.summary import (
    DIRECTION_LEAVES,
    SWELL_ATTRS,
    SWELL_TIER_NAMES,
    DailySummary,
    TideBundle,
)
from swell_recap.services.direction_binner import DirectionBinner
from swell_recap.services.summary_builder import DailySummaryBuilder

logger = logging.getLogger(__name__)

Path = Tuple[str, ...]


def _leaf_paths() -> Dict[str, Tuple[Path, ...]]:
    """Known field paths per leaf, highest priority first."""
    paths: Dict[str, Tuple[Path, ...]] = {}
    for tier in SWELL_TIER_NAMES:
        for attr in SWELL_ATTRS:
            candidates = [("swell", tier, attr)]
            if tier == "primary":
                # Older single-swell and flat camelCase shapes
                candidates.append(("swell", attr))
                candidates.append(("swell" + attr.capitalize(),))
            paths[f"swell.{tier}.{attr}"] = tuple(candidates)
    paths["waveHeight"] = (("waveHeight",),)
    paths["wind.speed"] = (("wind", "speed"), ("windSpeed",))
    paths["wind.direction"] = (("wind", "direction"), ("windDirection",))
    paths["waterTemperature"] = (("waterTemperature",),)
    return paths


LEAF_PATHS = _leaf_paths()


def _lookup(data: Mapping, path: Path) -> Any:
    node: Any = data
    for key in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


class PersistedSummaryReader:
    """
    Best-effort reader for summaries persisted in older shapes.

    Sources are tried per leaf in priority order: a ``summary`` envelope,
    the top-level current shape, the older single-swell and flat shapes,
    and finally a recomputation from a raw ``hourly`` snapshot.
    """

    def __init__(self, builder: DailySummaryBuilder = None):
        self.builder = builder or DailySummaryBuilder()

    @staticmethod
    def decode(persisted: Any) -> Optional[Mapping]:
        """Decode a stored value (JSON text or mapping) to a mapping."""
        if persisted is None:
            return None
        if isinstance(persisted, (str, bytes)):
            try:
                persisted = json.loads(persisted)
            except ValueError as e:
                logger.warning("Failed to parse persisted summary: %s", e)
                return None
        if not isinstance(persisted, Mapping):
            logger.warning("Ignoring persisted summary of type %s", type(persisted).__name__)
            return None
        return persisted

    def _sources(self, data: Mapping) -> Sequence[Mapping]:
        envelope = data.get("summary")
        if isinstance(envelope, Mapping):
            return (envelope, data)
        return (data,)

    def _recompute(self, data: Mapping, date: str) -> Optional[DailySummary]:
        hourly = data.get("hourly")
        if hourly is None:
            return None
        return self.builder.build(hourly, date)

    def read_leaves(self, data: Mapping, date: str) -> Dict[str, Optional[float]]:
        """Resolve every leaf from the stored object; None where absent."""
        sources = self._sources(data)
        leaves: Dict[str, Optional[float]] = {}
        for leaf, paths in LEAF_PATHS.items():
            value = None
            for source in sources:
                for path in paths:
                    value = _as_number(_lookup(source, path))
                    if value is not None:
                        break
                if value is not None:
                    break
            if value is not None and leaf in DIRECTION_LEAVES:
                value = int(DirectionBinner.normalize(value))
            leaves[leaf] = value

        if any(v is None for v in leaves.values()):
            recomputed = self._recompute(data, date)
            if recomputed is not None:
                for leaf, value in recomputed.leaves().items():
                    if leaves[leaf] is None:
                        leaves[leaf] = value
        return leaves

    def read_tides(self, data: Mapping, date: str) -> Optional[TideBundle]:
        """Stored tide bundle with at least one event, else None."""
        for source in self._sources(data):
            bundle = TideBundle.from_dict(source.get("tides"))
            if not bundle.is_empty():
                return bundle
        recomputed = self._recompute(data, date)
        if recomputed is not None and not recomputed.tides.is_empty():
            return recomputed.tides
        return None


class SummaryReconciler:
    """
    Combines a persisted summary with a freshly built one for the same day.

    Every scalar leaf prefers the persisted value when it is present and
    falls back to the fresh value. Tide bundles are never mixed: a stored
    bundle with any event replaces the fresh one wholesale.
    """

    def __init__(self, reader: PersistedSummaryReader = None):
        self.reader = reader or PersistedSummaryReader()

    def reconcile(
        self,
        persisted: Union[DailySummary, Mapping, str, bytes, None],
        fresh: Optional[DailySummary],
        date: Optional[str] = None,
    ) -> Optional[DailySummary]:
        """
        Merge ``persisted`` over ``fresh``.

        Args:
            persisted: Stored summary (any supported shape) or None
            fresh: Summary built from raw hourly data, or None
            date: Calendar date; defaults to the fresh summary's date

        Returns:
            Merged DailySummary, or None when neither side has data
        """
        if date is None:
            date = fresh.date if fresh is not None else None

        if isinstance(persisted, DailySummary):
            stored_leaves = persisted.leaves()
            stored_tides = persisted.tides if not persisted.tides.is_empty() else None
            date = date or persisted.date
        else:
            data = self.reader.decode(persisted)
            if data is not None and date is None:
                stored_date = data.get("date")
                date = stored_date if isinstance(stored_date, str) else None
            if data is None or date is None:
                return fresh
            stored_leaves = self.reader.read_leaves(data, date)
            stored_tides = self.reader.read_tides(data, date)

        fresh_leaves = fresh.leaves() if fresh is not None else {}
        if fresh is None and stored_tides is None and all(
            v is None for v in stored_leaves.values()
        ):
            return None

        merged = {
            leaf: (value if value is not None else fresh_leaves.get(leaf))
            for leaf, value in stored_leaves.items()
        }
        if stored_tides is not None:
            tides = stored_tides
        elif fresh is not None:
            tides = fresh.tides
        else:
            tides = TideBundle.empty()
        return DailySummary.from_leaves(date, merged, tides)
