# storefront/repos/unit_of_work.py
from sqlalchemy.orm import Session

from storefront.repos.address_repo import AddressRepo
from storefront.repos.base import UnitOfWork
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.repos.variant_repo import VariantRepo


class SqlUnitOfWork(UnitOfWork):
    """Unit of work bound to one SQLAlchemy session; commit/rollback end its transaction."""

    def __init__(self, db: Session):
        self.db = db
        self.addresses = AddressRepo(db)
        self.carts = CartRepo(db)
        self.variants = VariantRepo(db)
        self.orders = OrderRepo(db)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
