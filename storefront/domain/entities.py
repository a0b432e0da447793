"""
Plain records passed between services and repositories.

Repositories translate their storage rows into these records so the
checkout and status workflows never touch ORM objects directly.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from storefront.domain.order_status import OrderStatus, PaymentStatus, PAYMENT_METHOD_COD

ROLE_ADMIN = "ADMIN"
ROLE_CUSTOMER = "CUSTOMER"


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, resolved by the request layer."""
    user_id: str
    role: str = ROLE_CUSTOMER

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


@dataclass(frozen=True)
class AddressRecord:
    id: str
    user_id: str
    is_default: bool = False


@dataclass(frozen=True)
class CartLine:
    """A cart item resolved to its variant and the product's current selling price."""
    item_id: str
    variant_id: str
    size: str
    color: str
    stock: int
    unit_price: Decimal
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class CartSnapshot:
    cart_id: str
    user_id: str
    lines: List[CartLine] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total(self) -> Decimal:
        return sum((line.subtotal for line in self.lines), Decimal("0.00"))


@dataclass(frozen=True)
class NewOrderItem:
    variant_id: str
    quantity: int
    price: Decimal


@dataclass(frozen=True)
class NewOrder:
    user_id: str
    address_id: str
    total_amount: Decimal
    items: List[NewOrderItem]
    status: OrderStatus = OrderStatus.PENDING
    payment_method: str = PAYMENT_METHOD_COD
    payment_status: str = PaymentStatus.UNPAID.value


@dataclass(frozen=True)
class OrderRecord:
    id: str
    user_id: str
    address_id: str
    status: OrderStatus
    payment_method: str
    payment_status: str
    total_amount: Decimal
    tracking_number: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
