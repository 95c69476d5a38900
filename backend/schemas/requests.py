"""Pydantic schemas for request bodies."""
from pydantic import BaseModel, Field, field_validator
from typing import Literal, Optional

from swell_recap.utils.date_utils import parse_date

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def _check_calendar_date(value: Optional[str]) -> Optional[str]:
    if value is not None:
        parse_date(value)  # raises ValueError for e.g. 2025-02-30
    return value


class SnapshotRequest(BaseModel):
    """Body for taking a snapshot of one day at one point."""

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    date: Optional[str] = Field(default=None, pattern=DATE_PATTERN, description="Defaults to today (UTC)")

    @field_validator("date")
    @classmethod
    def check_date(cls, value: Optional[str]) -> Optional[str]:
        return _check_calendar_date(value)


class HistoryRequest(BaseModel):
    """Body for a history window around a center date."""

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    centerDate: str = Field(pattern=DATE_PATTERN)
    units: Literal["metric", "imperial"] = "metric"

    @field_validator("centerDate")
    @classmethod
    def check_center_date(cls, value: str) -> str:
        return _check_calendar_date(value)
