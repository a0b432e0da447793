# storefront/services/order_status_service.py
from storefront.domain.entities import OrderRecord, Principal
from storefront.domain.errors import (
    Forbidden,
    InvalidTransition,
    OrderNotFound,
    TrackingNumberNotAllowed,
    Unauthorized,
)
from storefront.domain.order_status import OrderStatus, can_transition
from storefront.repos.base import UnitOfWork
from storefront.services.notification_service import NotificationService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderStatusService:
    """
    Moves orders along PENDING -> CONFIRMED -> SHIPPED -> DELIVERED,
    with CANCELLED reachable from PENDING and CONFIRMED.
    """

    def __init__(self, uow: UnitOfWork, notification_service: NotificationService | None = None):
        self.uow = uow
        self.notification_service = notification_service

    def update_status(
        self,
        principal: Principal | None,
        order_id: str,
        status: OrderStatus,
        tracking_number: str | None = None,
    ) -> OrderRecord:
        """
        Admin status change.

        Re-selecting the current status is rejected like any other edge that
        is not in the graph. A tracking number is only accepted together with
        the move to SHIPPED.
        """
        if principal is None:
            raise Unauthorized()
        if not principal.is_admin:
            raise Forbidden()

        target = OrderStatus(status)
        order = self._load(order_id)

        if not can_transition(order.status, target):
            logger.warning(f"Rejected transition of order {order_id}: {order.status.value} -> {target.value}")
            raise InvalidTransition(order.status.value, target.value)

        if tracking_number and target != OrderStatus.SHIPPED:
            raise TrackingNumberNotAllowed(target.value)

        return self._apply(order, target, tracking_number or None)

    def cancel_own_order(self, principal: Principal | None, order_id: str) -> OrderRecord:
        """
        Customer cancellation of their own order, allowed only while it is PENDING.
        """
        if principal is None:
            raise Unauthorized()

        order = self._load(order_id)

        if order.user_id != principal.user_id:
            raise Forbidden()

        if order.status != OrderStatus.PENDING:
            raise InvalidTransition(
                order.status.value,
                OrderStatus.CANCELLED.value,
                message="Only pending orders can be cancelled",
            )

        return self._apply(order, OrderStatus.CANCELLED, None)

    def _load(self, order_id: str) -> OrderRecord:
        order = self.uow.orders.get_order(order_id)
        if not order:
            raise OrderNotFound(order_id)
        return order

    def _apply(self, order: OrderRecord, target: OrderStatus, tracking_number: str | None) -> OrderRecord:
        updated = self.uow.run(
            lambda uow: uow.orders.update_order_status(order.id, target, tracking_number)
        )

        logger.info(f"Order {order.id} status changed: {order.status.value} -> {target.value}")

        if self.notification_service is not None:
            try:
                self.notification_service.send_order_status_changed(
                    order.user_id, order.id, order.status.value, target.value
                )
            except Exception as e:
                logger.error(f"Failed to queue status notification for order {order.id}: {e}")
        return updated
