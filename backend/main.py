"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from backend.config import settings
from backend.api.routes import recap, accuracy
from backend.api.dependencies import get_forecast_cache, get_snapshot_repository

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare snapshot storage on startup; drop cached forecasts on shutdown."""
    snapshot_dir = get_snapshot_repository().snapshot_dir
    snapshot_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Snapshots stored in %s", snapshot_dir)
    yield
    get_forecast_cache().clear()

# Create FastAPI app with orjson for faster JSON serialization
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    redirect_slashes=False,
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recap.router)
app.include_router(accuracy.router)


@app.get("/")
async def root():
    """Service name and version."""
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "endpoints": ["/snapshot", "/snapshots", "/history", "/accuracy"],
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("backend.main:app", host="0.0.0.0", port=8001)
