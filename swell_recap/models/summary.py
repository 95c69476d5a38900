"""Daily summary value types."""
from typing import Any, Dict, Optional, Tuple
from attrs import define, field

SWELL_TIER_NAMES = ("primary", "secondary", "tertiary")
SWELL_ATTRS = ("height", "period", "direction")
DIRECTION_LEAVES = frozenset(
    [f"swell.{tier}.direction" for tier in SWELL_TIER_NAMES] + ["wind.direction"]
)


@define(frozen=True)
class SwellComponent:
    """One ranked swell train for a day."""

    height: Optional[float] = None  # metres
    period: Optional[float] = None  # seconds
    direction: Optional[int] = None  # compass degrees [0, 360)

    def is_empty(self) -> bool:
        return self.height is None and self.period is None and self.direction is None

    def to_dict(self) -> dict:
        return {
            "height": self.height,
            "period": self.period,
            "direction": self.direction,
        }


@define(frozen=True)
class SwellSet:
    """Primary, secondary and tertiary swell trains."""

    primary: Optional[SwellComponent] = None
    secondary: Optional[SwellComponent] = None
    tertiary: Optional[SwellComponent] = None

    def to_dict(self) -> dict:
        result = {}
        for tier in SWELL_TIER_NAMES:
            component = getattr(self, tier)
            result[tier] = component.to_dict() if component is not None else None
        return result


@define(frozen=True)
class Wind:
    speed: Optional[float] = None
    direction: Optional[int] = None

    def to_dict(self) -> dict:
        return {"speed": self.speed, "direction": self.direction}


@define(frozen=True)
class TideEvent:
    """A detected local extremum of sea level."""

    time: str
    height: float

    def to_dict(self) -> dict:
        return {"time": self.time, "height": self.height}

    @classmethod
    def from_dict(cls, data: Any) -> Optional["TideEvent"]:
        """Parse a stored event; None when it lacks a time or numeric height."""
        if not isinstance(data, dict):
            return None
        time = data.get("time")
        height = data.get("height")
        if not isinstance(time, str) or isinstance(height, bool):
            return None
        if not isinstance(height, (int, float)):
            return None
        return cls(time=time, height=float(height))


@define(frozen=True)
class TideBundle:
    """Up to two highs and two lows for a day, each in ascending time order."""

    highs: Tuple[TideEvent, ...] = field(default=(), converter=tuple)
    lows: Tuple[TideEvent, ...] = field(default=(), converter=tuple)

    @classmethod
    def empty(cls) -> "TideBundle":
        return cls()

    def is_empty(self) -> bool:
        return not self.highs and not self.lows

    @property
    def high(self) -> Optional[TideEvent]:
        """Highest event among ``highs`` (earliest wins a tie)."""
        if not self.highs:
            return None
        return max(self.highs, key=lambda e: e.height)

    @property
    def low(self) -> Optional[TideEvent]:
        """Lowest event among ``lows`` (earliest wins a tie)."""
        if not self.lows:
            return None
        return min(self.lows, key=lambda e: e.height)

    def to_dict(self) -> dict:
        return {
            "highs": [e.to_dict() for e in self.highs],
            "lows": [e.to_dict() for e in self.lows],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "TideBundle":
        """Parse a stored bundle, skipping malformed events."""
        if not isinstance(data, dict):
            return cls.empty()

        def _events(key: str) -> Tuple[TideEvent, ...]:
            raw = data.get(key)
            if not isinstance(raw, list):
                return ()
            events = (TideEvent.from_dict(item) for item in raw)
            return tuple(e for e in events if e is not None)

        return cls(highs=_events("highs"), lows=_events("lows"))


@define(frozen=True)
class DailySummary:
    """Representative marine conditions for one calendar day."""

    date: str
    swell: SwellSet = field(factory=SwellSet)
    wave_height: Optional[float] = None
    wind: Wind = field(factory=Wind)
    water_temperature: Optional[float] = None
    tides: TideBundle = field(factory=TideBundle)

    @property
    def tide_high(self) -> Optional[TideEvent]:
        return self.tides.high

    @property
    def tide_low(self) -> Optional[TideEvent]:
        return self.tides.low

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase JSON shape served and persisted."""
        high = self.tide_high
        low = self.tide_low
        return {
            "date": self.date,
            "swell": self.swell.to_dict(),
            "waveHeight": self.wave_height,
            "wind": self.wind.to_dict(),
            "waterTemperature": self.water_temperature,
            "tides": self.tides.to_dict(),
            "tideHigh": high.height if high else None,
            "tideHighTime": high.time if high else None,
            "tideLow": low.height if low else None,
            "tideLowTime": low.time if low else None,
        }

    def leaves(self) -> Dict[str, Optional[float]]:
        """Flatten the scalar fields to {dotted path: value}."""
        values: Dict[str, Optional[float]] = {}
        for tier in SWELL_TIER_NAMES:
            component = getattr(self.swell, tier)
            for attr in SWELL_ATTRS:
                values[f"swell.{tier}.{attr}"] = (
                    getattr(component, attr) if component is not None else None
                )
        values["waveHeight"] = self.wave_height
        values["wind.speed"] = self.wind.speed
        values["wind.direction"] = self.wind.direction
        values["waterTemperature"] = self.water_temperature
        return values

    @classmethod
    def from_leaves(
        cls,
        date: str,
        leaves: Dict[str, Optional[float]],
        tides: TideBundle = None,
    ) -> "DailySummary":
        """Inverse of ``leaves``; empty secondary/tertiary tiers become None."""
        tiers: Dict[str, Optional[SwellComponent]] = {}
        for tier in SWELL_TIER_NAMES:
            component = SwellComponent(
                **{attr: leaves.get(f"swell.{tier}.{attr}") for attr in SWELL_ATTRS}
            )
            if tier != "primary" and component.is_empty():
                component = None
            tiers[tier] = component
        return cls(
            date=date,
            swell=SwellSet(**tiers),
            wave_height=leaves.get("waveHeight"),
            wind=Wind(
                speed=leaves.get("wind.speed"),
                direction=leaves.get("wind.direction"),
            ),
            water_temperature=leaves.get("waterTemperature"),
            tides=tides if tides is not None else TideBundle.empty(),
        )
