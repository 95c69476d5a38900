"""Histogram-mode statistics for compass bearings."""
from typing import Any, Dict, Optional, Sequence
import numpy as np

from swell_recap.config import DIRECTION_BIN_WIDTH
from swell_recap.services.numeric_series import NumericSeries


def _round_half_up(values: np.ndarray) -> np.ndarray:
    return np.floor(values + 0.5)


class DirectionBinner:
    """
    Representative bearing of a noisy direction distribution.

    Bearings are bucketed into bins keyed by their centre
    (``round(d / width) * width``, with 360 folded onto 0) and the most
    occupied bin wins. A literal mean is meaningless for circular data, so
    the mode of the histogram is reported instead.

    Ties go to the lowest bin key.
    """

    def __init__(self, bin_width: int = DIRECTION_BIN_WIDTH):
        """
        Initialize binner.

        Args:
            bin_width: Bin width in degrees; must divide 360
        """
        if bin_width <= 0 or 360 % bin_width != 0:
            raise ValueError(f"bin_width must divide 360, got {bin_width}")
        self.bin_width = bin_width
        self.num_bins = 360 // bin_width

    @staticmethod
    def normalize(bearings: Any) -> np.ndarray:
        """Reduce bearings to integer degrees in [0, 360)."""
        arr = np.asarray(bearings, dtype=np.float64)
        return np.mod(_round_half_up(arr), 360).astype(np.int64)

    def bin_keys(self, bearings: Optional[Sequence[Any]]) -> np.ndarray:
        """Bin key (in degrees) for every clean bearing."""
        clean = NumericSeries.clean(bearings)
        normalized = self.normalize(clean)
        keys = _round_half_up(normalized / self.bin_width) * self.bin_width
        return np.mod(keys, 360).astype(np.int64)

    def histogram(self, bearings: Optional[Sequence[Any]]) -> Dict[int, int]:
        """Occupied bins as {bin key: count}, in ascending key order."""
        keys = self.bin_keys(bearings)
        counts = np.bincount(keys // self.bin_width, minlength=self.num_bins)
        return {
            int(i * self.bin_width): int(c)
            for i, c in enumerate(counts)
            if c > 0
        }

    def most_common(self, bearings: Optional[Sequence[Any]]) -> Optional[int]:
        """
        Most occupied bin key, or None when there are no clean bearings.

        Args:
            bearings: Per-hour bearings in degrees (None/NaN allowed)

        Returns:
            Bin key in degrees [0, 360)
        """
        keys = self.bin_keys(bearings)
        if keys.size == 0:
            return None
        counts = np.bincount(keys // self.bin_width, minlength=self.num_bins)
        # argmax returns the first maximum, i.e. the lowest bin key
        return int(np.argmax(counts)) * self.bin_width
