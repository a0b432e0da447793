# storefront/services/checkout_service.py
import uuid
from decimal import Decimal

import redis
from sqlalchemy.exc import SQLAlchemyError

from storefront.domain.entities import CartSnapshot, NewOrder, NewOrderItem, Principal
from storefront.domain.errors import (
    CartChanged,
    EmptyCart,
    InsufficientStock,
    InvalidAddress,
    OrderPlacementFailed,
    StockConflict,
    StorefrontError,
    Unauthorized,
)
from storefront.repos.base import UnitOfWork
from storefront.services.lock_service import LockService
from storefront.services.notification_service import NotificationService
from storefront.utils.settings import CHECKOUT_LOCK_TTL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CheckoutService:
    """
    Converts a shopper's cart into a cash-on-delivery order.

    Everything is validated before the first write; the writes (order,
    order items, stock decrements, cart clearing) happen in one unit of
    work so either all of them are committed or none are.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        lock_service: LockService | None = None,
        notification_service: NotificationService | None = None,
        lock_ttl: int = CHECKOUT_LOCK_TTL_SECONDS,
    ):
        self.uow = uow
        self.lock_service = lock_service
        self.notification_service = notification_service
        self.lock_ttl = lock_ttl

    def place_order(self, principal: Principal | None, address_id: str) -> str:
        if principal is None:
            raise Unauthorized()

        if not address_id:
            raise InvalidAddress("Please select a delivery address")

        token = uuid.uuid4().hex
        if self.lock_service is not None:
            try:
                locked = self.lock_service.acquire_checkout_lock(principal.user_id, token, ttl=self.lock_ttl)
            except redis.RedisError as e:
                logger.error(f"Could not take checkout lock for user {principal.user_id}: {e}")
                raise OrderPlacementFailed() from e
            if not locked:
                logger.warning(f"Checkout already in progress for user {principal.user_id}")
                raise OrderPlacementFailed("Checkout already in progress for this cart")

        try:
            order_id = self._place_order(principal, address_id)
        finally:
            if self.lock_service is not None:
                self._release_lock(principal.user_id, token)

        # the order is committed; a failed notification is only logged
        if self.notification_service is not None:
            try:
                self.notification_service.send_order_placed(principal.user_id, order_id)
            except Exception as e:
                logger.error(f"Failed to queue order placed notification for order {order_id}: {e}")

        return order_id

    def _release_lock(self, user_id: str, token: str) -> None:
        try:
            self.lock_service.release_checkout_lock(user_id, token)
        except redis.RedisError as e:
            # the lock still expires after its TTL
            logger.error(f"Failed to release checkout lock for user {user_id}: {e}")

    def _place_order(self, principal: Principal, address_id: str) -> str:
        address = self.uow.addresses.get_address(address_id)
        if not address or address.user_id != principal.user_id:
            logger.warning(f"Checkout rejected for user {principal.user_id}: invalid address {address_id}")
            raise InvalidAddress()

        cart = self.uow.carts.load_cart_with_items(principal.user_id)
        if not cart or cart.is_empty:
            logger.warning(f"Checkout rejected for user {principal.user_id}: cart is empty")
            raise EmptyCart()

        self._verify_stock(cart)

        # prices are captured here and frozen on the order
        items = [
            NewOrderItem(variant_id=line.variant_id, quantity=line.quantity, price=line.unit_price)
            for line in cart.lines
        ]
        total_amount = sum((item.price * item.quantity for item in items), Decimal("0.00"))

        new_order = NewOrder(
            user_id=principal.user_id,
            address_id=address_id,
            total_amount=total_amount,
            items=items,
        )

        def work(uow: UnitOfWork) -> str:
            order_id = uow.orders.create_order_with_items(new_order)

            # same variant order for every checkout, so row locks are taken in a consistent order
            for item in sorted(items, key=lambda i: i.variant_id):
                if not uow.variants.decrement_stock(item.variant_id, item.quantity):
                    raise StockConflict(item.variant_id, item.quantity)

            # only the priced items are removed; a cart already emptied by a
            # concurrent checkout of the same cart aborts this one
            item_ids = [line.item_id for line in cart.lines]
            removed = uow.carts.clear_cart(cart.cart_id, item_ids)
            if removed != len(item_ids):
                raise CartChanged(cart.cart_id, expected=len(item_ids), removed=removed)
            return order_id

        logger.info(
            f"Placing order for user {principal.user_id}: {len(items)} item(s), total {total_amount}"
        )

        try:
            order_id = self.uow.run(work)
        except (StorefrontError, SQLAlchemyError) as e:
            logger.error(f"Checkout rolled back for user {principal.user_id}: {e}")
            raise OrderPlacementFailed() from e

        logger.info(f"Order {order_id} created from cart {cart.cart_id}")
        return order_id

    @staticmethod
    def _verify_stock(cart: CartSnapshot) -> None:
        for line in cart.lines:
            if line.quantity > line.stock:
                logger.warning(
                    f"Not enough stock for variant {line.variant_id}: "
                    f"requested {line.quantity}, available {line.stock}"
                )
                raise InsufficientStock(
                    variant_id=line.variant_id,
                    color=line.color,
                    size=line.size,
                    requested=line.quantity,
                    available=line.stock,
                )
