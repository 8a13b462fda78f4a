"""
Dashboard routes.
"""
from fastapi import APIRouter, Depends, Query
from typing import List

from dealertrack.database import JsonStore, get_store
from dealertrack.schemas.dashboard import DashboardStats
from dealertrack.schemas.part import Part as PartSchema
from dealertrack.schemas.service_order import ServiceOrder as ServiceOrderSchema
from dealertrack.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_service(store: JsonStore = Depends(get_store)) -> DashboardService:
    return DashboardService(store)


@router.get("", response_model=DashboardStats)
def get_dashboard(service: DashboardService = Depends(get_dashboard_service)):
    """
    Headline counts and cumulative revenue.
    """
    return service.get_dashboard_stats()


@router.get("/recent-orders", response_model=List[ServiceOrderSchema])
def get_recent_orders(
    limit: int = Query(5, ge=1, le=100),
    service: DashboardService = Depends(get_dashboard_service),
):
    """
    Most recently created service orders, newest first.
    """
    return service.recent_service_orders(limit)


@router.get("/low-stock", response_model=List[PartSchema])
def get_low_stock(service: DashboardService = Depends(get_dashboard_service)):
    """
    Parts at or below their minimum stock level.
    """
    return service.low_stock_parts()
