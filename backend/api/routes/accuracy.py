"""API routes for forecast accuracy."""
from fastapi import APIRouter, Depends, Query, HTTPException

from backend.schemas.summary import AccuracyResponse
from backend.services.recap_service import RecapService
from backend.api.dependencies import get_recap_service
from backend.schemas.requests import DATE_PATTERN
from swell_recap.utils.date_utils import parse_date

router = APIRouter(tags=["accuracy"])


@router.get("/accuracy", response_model=AccuracyResponse)
async def get_accuracy(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    centerDate: str = Query(..., pattern=DATE_PATTERN),
    recap_service: RecapService = Depends(get_recap_service),
) -> AccuracyResponse:
    """Predicted-minus-actual deltas per day with MAE and bias per field."""
    try:
        parse_date(centerDate)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Invalid calendar date: {centerDate}")
    return await recap_service.get_accuracy(lat, lon, centerDate)
