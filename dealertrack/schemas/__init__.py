"""
Pydantic schemas for request/response validation.
"""
from dealertrack.schemas.base import DeleteResult
from dealertrack.schemas.part import PartBase, PartCreate, PartUpdate, Part
from dealertrack.schemas.customer import CustomerCreate, CustomerUpdate, Customer
from dealertrack.schemas.service_order import (
    LaborLine, PartLine, ServiceOrderCreate, ServiceOrderUpdate, ServiceOrder,
)
from dealertrack.schemas.dashboard import DashboardStats

__all__ = [
    "DeleteResult",
    "PartBase", "PartCreate", "PartUpdate", "Part",
    "CustomerCreate", "CustomerUpdate", "Customer",
    "LaborLine", "PartLine", "ServiceOrderCreate", "ServiceOrderUpdate", "ServiceOrder",
    "DashboardStats",
]
