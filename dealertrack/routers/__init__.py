"""
API routers.
"""
from dealertrack.routers import customers, dashboard, parts, service_orders

__all__ = ["customers", "dashboard", "parts", "service_orders"]
