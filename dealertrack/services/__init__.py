from dealertrack.services.part_service import PartService
from dealertrack.services.customer_service import CustomerService
from dealertrack.services.service_order_service import ServiceOrderService
from dealertrack.services.dashboard_service import DashboardService

__all__ = ["PartService", "CustomerService", "ServiceOrderService", "DashboardService"]
