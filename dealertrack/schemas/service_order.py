"""
Pydantic schemas for ServiceOrder.
"""
from pydantic import BaseModel, ConfigDict, field_validator
from typing import List, Optional, Union

from dealertrack.models.service_order import ServiceOrderStatus
from dealertrack.schemas.base import CamelModel


class PartLine(BaseModel):
    """A part billed on a repair order.

    Extra keys (``partId``, ``partNumber``, ``description`` ...) are kept
    as sent so the line can reference the inventory item.
    """
    price: float
    quantity: float

    model_config = ConfigDict(extra="allow")


class LaborLine(BaseModel):
    """A labor charge on a repair order."""
    rate: float
    hours: float

    model_config = ConfigDict(extra="allow")


class ServiceOrderUpdate(CamelModel):
    """Schema for updating a service order.

    ``subtotal``, ``tax`` and ``total`` are not accepted; they are always
    recomputed from the line items.
    """
    ro_number: Optional[str] = None
    customer_id: Optional[Union[str, int]] = None
    customer_name: Optional[str] = None
    vehicle: Optional[str] = None
    vin: Optional[str] = None
    mileage: Optional[Union[int, float, str]] = None
    status: Optional[str] = None
    service_advisor: Optional[str] = None
    technician: Optional[str] = None
    concerns: Optional[str] = None
    parts_used: Optional[List[PartLine]] = None
    labor_lines: Optional[List[LaborLine]] = None
    promised_date: Optional[str] = None

    @field_validator("parts_used", "labor_lines", mode="before")
    @classmethod
    def null_lines_are_empty(cls, value):
        # An explicit null clears the lines; it is never stored.
        return [] if value is None else value


class ServiceOrderCreate(ServiceOrderUpdate):
    """Schema for creating a service order."""
    status: str = ServiceOrderStatus.OPEN.value


class ServiceOrder(ServiceOrderUpdate):
    """Schema for service order responses."""
    id: str
    parts_used: List[dict] = []
    labor_lines: List[dict] = []
    subtotal: float = 0.0
    tax: float = 0.0
    total: float = 0.0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
