"""Pydantic schemas for daily summaries."""
from pydantic import BaseModel
from typing import Dict, List, Optional


class SwellComponentSchema(BaseModel):
    """One swell train."""

    height: Optional[float] = None
    period: Optional[float] = None
    direction: Optional[int] = None
    cardinal: Optional[str] = None


class SwellSchema(BaseModel):
    primary: Optional[SwellComponentSchema] = None
    secondary: Optional[SwellComponentSchema] = None
    tertiary: Optional[SwellComponentSchema] = None


class WindSchema(BaseModel):
    speed: Optional[float] = None
    direction: Optional[int] = None
    cardinal: Optional[str] = None


class TideEventSchema(BaseModel):
    time: str
    height: float


class TideBundleSchema(BaseModel):
    highs: List[TideEventSchema] = []
    lows: List[TideEventSchema] = []


class DailySummarySchema(BaseModel):
    """A day's representative swell, wind, water temperature and tides."""

    date: str
    swell: SwellSchema
    waveHeight: Optional[float] = None
    wind: WindSchema
    waterTemperature: Optional[float] = None
    tides: TideBundleSchema
    tideHigh: Optional[float] = None
    tideHighTime: Optional[str] = None
    tideLow: Optional[float] = None
    tideLowTime: Optional[str] = None


class SnapshotResponse(BaseModel):
    """Stored snapshot: raw hourly arrays plus the derived summary."""

    lat: float
    lon: float
    date: str
    hourly: Dict[str, list]
    summary: Optional[DailySummarySchema] = None


class HistoryDay(BaseModel):
    date: str
    actual: Optional[DailySummarySchema] = None
    predicted: Optional[DailySummarySchema] = None


class HistoryResponse(BaseModel):
    """Response schema for center date +/- radius history."""

    lat: float
    lon: float
    centerDate: str
    days: List[HistoryDay]


class AccuracyRow(BaseModel):
    date: str
    deltas: Optional[Dict[str, Optional[float]]] = None


class AccuracySummary(BaseModel):
    mae: Dict[str, Optional[float]]
    bias: Dict[str, Optional[float]]
    count: Dict[str, int]


class AccuracyResponse(BaseModel):
    """Predicted-minus-actual deltas with per-field error statistics."""

    lat: float
    lon: float
    centerDate: str
    rows: List[AccuracyRow]
    summary: AccuracySummary


class SnapshotListResponse(BaseModel):
    """Dates with a stored snapshot at one (rounded) location."""

    lat: float
    lon: float
    dates: List[str]
