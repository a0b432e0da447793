"""
Repository interfaces used by the checkout and order status workflows.

Only the narrow operations those workflows need are declared here; the
SQLAlchemy repositories add the plain CRUD queries used by the rest of the
API on top of them.
"""
from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence, TypeVar

from storefront.domain.entities import AddressRecord, CartSnapshot, NewOrder, OrderRecord
from storefront.domain.order_status import OrderStatus

T = TypeVar("T")


class AddressRepository(ABC):

    @abstractmethod
    def get_address(self, address_id: str) -> Optional[AddressRecord]:
        pass


class CartRepository(ABC):

    @abstractmethod
    def load_cart_with_items(self, user_id: str) -> Optional[CartSnapshot]:
        """Load the user's cart with every item resolved to variant stock and product price."""
        pass

    @abstractmethod
    def clear_cart(self, cart_id: str, item_ids: Sequence[str]) -> int:
        """Delete the given items of the cart, keeping the cart itself.

        Returns the number of items actually removed; items already gone are not counted.
        """
        pass


class VariantRepository(ABC):

    @abstractmethod
    def decrement_stock(self, variant_id: str, quantity: int) -> bool:
        """Decrement stock by `quantity` only if the result stays non-negative.

        Returns False when no row was changed.
        """
        pass


class OrderRepository(ABC):

    @abstractmethod
    def create_order_with_items(self, order: NewOrder) -> str:
        pass

    @abstractmethod
    def get_order(self, order_id: str) -> Optional[OrderRecord]:
        pass

    @abstractmethod
    def update_order_status(
        self,
        order_id: str,
        status: OrderStatus,
        tracking_number: Optional[str] = None,
    ) -> OrderRecord:
        pass


class UnitOfWork(ABC):
    """Transaction-scoped access to the repositories.

    `run(work)` calls `work(self)` and commits every write it made, or rolls
    all of them back and re-raises.
    """

    addresses: AddressRepository
    carts: CartRepository
    variants: VariantRepository
    orders: OrderRepository

    def run(self, work: Callable[["UnitOfWork"], T]) -> T:
        try:
            result = work(self)
            self.commit()
        except Exception:
            self.rollback()
            raise
        return result

    @abstractmethod
    def commit(self) -> None:
        pass

    @abstractmethod
    def rollback(self) -> None:
        pass
