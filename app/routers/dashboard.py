"""Dashboard summary counters."""

from fastapi import APIRouter, Depends

from app.deps import get_storage
from app.schemas.stats import DashboardStats
from app.services.storage import FleetStorage

router = APIRouter()


@router.get("/dashboard/stats", response_model=DashboardStats, summary="Fleet, stock and alert counters")
def get_dashboard_stats(storage: FleetStorage = Depends(get_storage)):
    return storage.get_dashboard_stats()
