"""
Pydantic schemas for Part.
"""
from pydantic import Field
from typing import Optional

from dealertrack.schemas.base import Amount, CamelModel, Count


class PartBase(CamelModel):
    """Base part schema with common fields."""
    name: Optional[str] = None
    manufacturer: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    labor_time: Amount = 0.0
    quantity: Count = 0
    min_stock: Count = 0
    dealer_cost: Amount = 0.0
    labor_cost: Amount = 0.0
    sales_cost: Amount = 0.0
    retail_price: Amount = 0.0


class PartCreate(PartBase):
    """Schema for creating a part."""
    part_number: str = Field(..., min_length=1)


class PartUpdate(CamelModel):
    """Schema for updating a part. Only supplied fields are merged."""
    name: Optional[str] = None
    part_number: Optional[str] = None
    manufacturer: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    labor_time: Optional[Amount] = None
    quantity: Optional[Count] = None
    min_stock: Optional[Count] = None
    dealer_cost: Optional[Amount] = None
    labor_cost: Optional[Amount] = None
    sales_cost: Optional[Amount] = None
    retail_price: Optional[Amount] = None


class Part(PartUpdate):
    """Schema for part responses."""
    id: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
