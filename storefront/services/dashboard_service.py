from typing import Any, Dict

from sqlalchemy.orm import Session

from storefront.domain.entities import Principal
from storefront.domain.errors import Forbidden
from storefront.domain.order_status import OrderStatus
from storefront.repos.catalog_repo import CatalogRepo
from storefront.repos.order_repo import OrderRepo
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class DashboardService:
    """Headline numbers for the admin dashboard."""

    def __init__(self, db: Session):
        self.catalog = CatalogRepo(db)
        self.orders = OrderRepo(db)
        self.users = UserRepo(db)

    def get_stats(self, principal: Principal) -> Dict[str, Any]:
        if not principal.is_admin:
            logger.warning(f"User {principal.user_id} denied admin dashboard")
            raise Forbidden()

        # revenue counts every order, cancelled ones included
        return {
            "total_products": self.catalog.count_products(),
            "active_products": self.catalog.count_products(status="ACTIVE"),
            "total_categories": self.catalog.count_categories(),
            "total_orders": self.orders.count_all(),
            "pending_orders": self.orders.count_all(OrderStatus.PENDING),
            "total_users": self.users.count_users(),
            "total_revenue": self.orders.total_revenue(),
        }
