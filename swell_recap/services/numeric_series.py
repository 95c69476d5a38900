"""Cleaning and summary statistics for hourly samples with gaps."""
from typing import Any, Optional, Sequence
import numpy as np
import pandas as pd

from swell_recap.config import VALUE_DECIMALS


class NumericSeries:
    """Statistics over arrays of optionally-missing numeric samples."""

    def __init__(self, decimals: int = VALUE_DECIMALS):
        """
        Initialize with output rounding.

        Args:
            decimals: Decimal places kept by ``round_value``
        """
        self.decimals = decimals

    @staticmethod
    def clean(samples: Optional[Sequence[Any]]) -> np.ndarray:
        """
        Drop null, NaN, non-numeric and non-finite entries, preserving order.

        Args:
            samples: Raw samples (lists with None, numpy arrays with NaN, ...)

        Returns:
            Float array of the remaining finite values
        """
        if samples is None:
            return np.array([], dtype=np.float64)
        if isinstance(samples, np.ndarray) and samples.dtype.kind == "f":
            arr = samples.astype(np.float64, copy=False)
        else:
            raw = pd.Series(list(samples), dtype=object)
            raw = raw.map(lambda v: None if isinstance(v, bool) else v)
            arr = pd.to_numeric(raw, errors="coerce").to_numpy(dtype=np.float64)
        return arr[np.isfinite(arr)]

    def median(self, samples: Optional[Sequence[Any]]) -> Optional[float]:
        """
        Standard statistical median of the clean samples.

        Odd counts give the middle element, even counts the mean of the two
        middle elements. Empty input gives None.
        """
        values = self.clean(samples)
        if values.size == 0:
            return None
        return float(np.median(values))

    def round_value(self, value: Optional[float]) -> Optional[float]:
        """Round a final output value; None passes through."""
        if value is None:
            return None
        return round(float(value), self.decimals)

    def summarize(self, samples: Optional[Sequence[Any]]) -> Optional[float]:
        """Rounded median, the representative value of a day's samples."""
        return self.round_value(self.median(samples))
