"""Unit conversions for presenting daily summaries."""
import copy
from typing import Any, Dict, Optional

CARDINALS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]
METRIC = "metric"
IMPERIAL = "imperial"


def to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def kmh_to_mph(kmh: float) -> float:
    return kmh * 0.621371


def m_to_ft(metres: float) -> float:
    return metres * 3.28084


def cardinal(degrees: Optional[float]) -> Optional[str]:
    """16-point compass label for a bearing."""
    if degrees is None:
        return None
    # Half-up rounding to the nearest 22.5 degree sector
    return CARDINALS[int(degrees / 22.5 + 0.5) % 16]


def _convert(value: Optional[float], fn, decimals: int) -> Optional[float]:
    if value is None:
        return None
    return round(fn(value), decimals)


def convert_summary(summary: Dict[str, Any], units: str = METRIC, decimals: int = 3) -> Dict[str, Any]:
    """
    Convert a summary dict (``DailySummary.to_dict()`` shape) to ``units``.

    Metric is the stored unit system and is returned unchanged. Imperial
    converts heights to feet, wind to mph and water temperature to
    Fahrenheit.
    """
    if units == METRIC:
        return summary
    if units != IMPERIAL:
        raise ValueError(f"Unknown unit system: {units}")

    out = copy.deepcopy(summary)
    for component in (out.get("swell") or {}).values():
        if component:
            component["height"] = _convert(component.get("height"), m_to_ft, decimals)
    out["waveHeight"] = _convert(out.get("waveHeight"), m_to_ft, decimals)
    if out.get("wind"):
        out["wind"]["speed"] = _convert(out["wind"].get("speed"), kmh_to_mph, decimals)
    out["waterTemperature"] = _convert(out.get("waterTemperature"), to_fahrenheit, decimals)

    tides = out.get("tides") or {}
    for key in ("highs", "lows"):
        for event in tides.get(key) or []:
            event["height"] = _convert(event.get("height"), m_to_ft, decimals)
    for key in ("tideHigh", "tideLow"):
        out[key] = _convert(out.get(key), m_to_ft, decimals)
    return out


def with_cardinals(summary: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of a summary dict with a ``cardinal`` label beside every direction."""
    out = copy.deepcopy(summary)
    for component in (out.get("swell") or {}).values():
        if component:
            component["cardinal"] = cardinal(component.get("direction"))
    if out.get("wind"):
        out["wind"]["cardinal"] = cardinal(out["wind"].get("direction"))
    return out
