"""Order lifecycle statuses and the transitions an administrator may apply."""

from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class PaymentStatus(str, Enum):
    UNPAID = "UNPAID"
    PAID = "PAID"


PAYMENT_METHOD_COD = "COD"

STATUS_TRANSITIONS = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def allowed_transitions(current: OrderStatus) -> frozenset:
    return STATUS_TRANSITIONS.get(OrderStatus(current), frozenset())


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    """A status is never reachable from itself, so re-saving the current status is rejected."""
    return OrderStatus(target) in allowed_transitions(current)


def is_terminal(status: OrderStatus) -> bool:
    return not allowed_transitions(status)
