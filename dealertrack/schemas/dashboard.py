"""
Pydantic schema for dashboard statistics.
"""
from dealertrack.schemas.base import CamelModel


class DashboardStats(CamelModel):
    """Aggregate counts and revenue across all collections."""
    total_parts: int
    low_stock_parts: int
    total_customers: int
    open_service_orders: int
    total_service_orders: int
    total_revenue: float
