"""API routes for snapshots and history."""
from fastapi import APIRouter, Depends, Query

from backend.schemas.requests import HistoryRequest, SnapshotRequest
from backend.schemas.summary import HistoryResponse, SnapshotListResponse, SnapshotResponse
from backend.services.recap_service import RecapService
from backend.api.dependencies import get_recap_service
from swell_recap.utils.date_utils import today_utc

router = APIRouter(tags=["recap"])


@router.post("/snapshot", response_model=SnapshotResponse)
async def take_snapshot(
    request: SnapshotRequest,
    recap_service: RecapService = Depends(get_recap_service),
) -> SnapshotResponse:
    """
    Fetch hourly marine and wind data for a day and store it.

    The stored record keeps the raw hourly arrays (including the padding
    days used for tide detection) alongside the derived daily summary.
    """
    date = request.date or today_utc()
    return await recap_service.take_snapshot(request.lat, request.lon, date)


@router.post("/history", response_model=HistoryResponse)
async def get_history(
    request: HistoryRequest,
    recap_service: RecapService = Depends(get_recap_service),
) -> HistoryResponse:
    """
    Get actual and predicted summaries around a center date.

    Days without data come back with null summaries rather than an error.
    """
    return await recap_service.get_history(
        request.lat, request.lon, request.centerDate, request.units
    )


@router.get("/snapshots", response_model=SnapshotListResponse)
async def list_snapshots(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    recap_service: RecapService = Depends(get_recap_service),
) -> SnapshotListResponse:
    """List the dates already snapshotted at a location."""
    return recap_service.list_snapshots(lat, lon)
