"""Hourly time series bundle as returned by marine/weather forecast APIs."""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
import numpy as np
import pandas as pd
from attrs import define, field

from swell_recap.config import TIME_KEY


def _to_float_array(values: Any, length: int) -> np.ndarray:
    """
    Coerce a raw channel array to floats aligned to the timestamp array.

    Nulls, non-numeric and non-finite samples become NaN. Short arrays are
    padded with NaN, long arrays are truncated.
    """
    if not isinstance(values, (list, tuple, np.ndarray, pd.Series)):
        return np.full(length, np.nan)

    raw = pd.Series(list(values)[:length], dtype=object)
    # bools are ints to pandas; they are never valid samples
    raw = raw.map(lambda v: None if isinstance(v, bool) else v)
    arr = pd.to_numeric(raw, errors="coerce").to_numpy(dtype=np.float64)
    arr[~np.isfinite(arr)] = np.nan

    if len(arr) < length:
        arr = np.concatenate([arr, np.full(length - len(arr), np.nan)])
    return arr


@define(frozen=True, eq=False)
class HourlySeries:
    """Timestamps plus index-aligned numeric channels (NaN = absent sample)."""

    time: Tuple[str, ...]
    channels: Dict[str, np.ndarray] = field(factory=dict)

    @classmethod
    def from_payload(cls, hourly: Any) -> Optional["HourlySeries"]:
        """
        Build a series from a raw ``hourly`` payload.

        Returns None when the payload has no usable timestamp array.
        """
        if not isinstance(hourly, Mapping):
            return None
        time = hourly.get(TIME_KEY)
        if not isinstance(time, (list, tuple, np.ndarray)):
            return None

        times = tuple(str(t) for t in time)
        channels = {
            name: _to_float_array(values, len(times))
            for name, values in hourly.items()
            if name != TIME_KEY and isinstance(values, (list, tuple, np.ndarray))
        }
        return cls(time=times, channels=channels)

    def __len__(self) -> int:
        return len(self.time)

    @property
    def channel_names(self) -> List[str]:
        return sorted(self.channels)

    def channel(self, name: str) -> np.ndarray:
        """Get a channel as a float array; missing channels are all-NaN."""
        values = self.channels.get(name)
        if values is None:
            return np.full(len(self.time), np.nan)
        return values

    def day_indices(self, date: str) -> np.ndarray:
        """Indices of samples whose timestamp falls on ``date`` (YYYY-MM-DD)."""
        prefix = date + "T"
        return np.array(
            [i for i, t in enumerate(self.time) if t.startswith(prefix)],
            dtype=np.int64,
        )

    def to_frame(self) -> pd.DataFrame:
        """Channels as a DataFrame indexed by timestamp string."""
        df = pd.DataFrame(self.channels, index=pd.Index(self.time, name=TIME_KEY))
        # Duplicate timestamps keep their first sample
        return df[~df.index.duplicated(keep="first")]

    def merge(self, other: "HourlySeries") -> "HourlySeries":
        """
        Outer-join two series on timestamp.

        Channels present in both keep this series' non-null samples and fill
        gaps from ``other``. The result is sorted by timestamp.
        """
        left = self.to_frame()
        right = other.to_frame()
        merged = left.combine_first(right).sort_index()
        return HourlySeries(
            time=tuple(merged.index),
            channels={
                name: merged[name].to_numpy(dtype=np.float64)
                for name in merged.columns
            },
        )

    def to_payload(self) -> Dict[str, List[Any]]:
        """Convert to a JSON-serializable ``hourly`` payload (NaN -> None)."""
        payload: Dict[str, List[Any]] = {TIME_KEY: list(self.time)}
        for name in self.channel_names:
            payload[name] = [
                None if np.isnan(v) else float(v) for v in self.channels[name]
            ]
        return payload

    @classmethod
    def concat(cls, parts: Iterable["HourlySeries"]) -> Optional["HourlySeries"]:
        """Merge any number of series; None when nothing was given."""
        result: Optional[HourlySeries] = None
        for part in parts:
            if part is None:
                continue
            result = part if result is None else result.merge(part)
        return result
