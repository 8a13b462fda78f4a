"""
Service order routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional

from dealertrack.database import JsonStore, get_store
from dealertrack.exceptions import NotFoundError
from dealertrack.schemas.base import DeleteResult
from dealertrack.schemas.service_order import (
    ServiceOrder as ServiceOrderSchema,
    ServiceOrderCreate,
    ServiceOrderUpdate,
)
from dealertrack.services.service_order_service import ServiceOrderService

router = APIRouter(prefix="/service-orders", tags=["service-orders"])


def get_service_order_service(store: JsonStore = Depends(get_store)) -> ServiceOrderService:
    return ServiceOrderService(store)


@router.get("", response_model=List[ServiceOrderSchema])
def get_service_orders(
    status_filter: Optional[str] = Query(None, alias="status"),
    service: ServiceOrderService = Depends(get_service_order_service),
):
    """
    Get all service orders with an optional exact status filter.
    """
    return service.list(status_filter)


@router.get("/{order_id}", response_model=ServiceOrderSchema)
def get_service_order(
    order_id: str,
    service: ServiceOrderService = Depends(get_service_order_service),
):
    """
    Get a specific service order by ID.
    """
    try:
        return service.get(order_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.post("", response_model=ServiceOrderSchema, status_code=status.HTTP_201_CREATED)
def create_service_order(
    order: ServiceOrderCreate,
    service: ServiceOrderService = Depends(get_service_order_service),
):
    """
    Create a new service order. Totals are computed from the line items.
    """
    return service.create(order.model_dump(by_alias=True))


@router.put("/{order_id}", response_model=ServiceOrderSchema)
def update_service_order(
    order_id: str,
    order_update: ServiceOrderUpdate,
    service: ServiceOrderService = Depends(get_service_order_service),
):
    """
    Update a service order and recompute its totals.
    """
    try:
        return service.update(order_id, order_update.to_record())
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.delete("/{order_id}", response_model=DeleteResult)
def delete_service_order(
    order_id: str,
    service: ServiceOrderService = Depends(get_service_order_service),
):
    """
    Delete a service order.
    """
    service.delete(order_id)
    return DeleteResult()
