# storefront/services/order_service.py
import math
from typing import Any, Dict

from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.domain.entities import Principal
from storefront.domain.errors import Forbidden, NotFound
from storefront.domain.order_status import OrderStatus
from storefront.repos.order_repo import OrderRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

USER_ORDERS_MAX_LIMIT = 50
ADMIN_ORDERS_PER_PAGE = 20


class OrderService:
    """
    Read side of the order domain: order history for shoppers and the
    admin order list. Status changes live in OrderStatusService.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)

    def list_my_orders(self, principal: Principal, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        page = max(1, page)
        limit = min(USER_ORDERS_MAX_LIMIT, max(1, limit))

        orders = self.repo.list_for_user(principal.user_id, offset=(page - 1) * limit, limit=limit)
        total = self.repo.count_for_user(principal.user_id)

        return {
            "orders": orders,
            "total": total,
            "page": page,
            "pages": math.ceil(total / limit),
        }

    def get_my_order(self, principal: Principal, order_id: str) -> OrderModel:
        order = self.repo.get_order_detail(order_id)
        # someone else's order is reported as missing
        if not order or order.user_id != principal.user_id:
            logger.warning(f"Order {order_id} not visible to user {principal.user_id}")
            raise NotFound("Order not found")
        return order

    def list_all_orders(
        self,
        principal: Principal,
        page: int = 1,
        status: OrderStatus | None = None,
    ) -> Dict[str, Any]:
        if not principal.is_admin:
            logger.warning(f"User {principal.user_id} denied admin order list")
            raise Forbidden()

        page = max(1, page)
        orders = self.repo.list_all(
            status,
            offset=(page - 1) * ADMIN_ORDERS_PER_PAGE,
            limit=ADMIN_ORDERS_PER_PAGE,
        )
        total = self.repo.count_all(status)

        return {
            "orders": orders,
            "total": total,
            "page": page,
            "pages": math.ceil(total / ADMIN_ORDERS_PER_PAGE),
        }

    def get_order(self, principal: Principal, order_id: str) -> OrderModel:
        if not principal.is_admin:
            logger.warning(f"User {principal.user_id} denied admin view of order {order_id}")
            raise Forbidden()

        order = self.repo.get_order_detail(order_id)
        if not order:
            raise NotFound("Order not found")
        return order
