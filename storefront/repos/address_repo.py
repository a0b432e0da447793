# storefront/repos/address_repo.py
from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from storefront.data.models.address import AddressModel
from storefront.data.models.order import OrderModel
from storefront.domain.entities import AddressRecord
from storefront.repos.base import AddressRepository


class AddressRepo(AddressRepository):
    def __init__(self, db: Session):
        self.db = db

    def get_address(self, address_id: str) -> Optional[AddressRecord]:
        address = self.get(address_id)
        if not address:
            return None
        return AddressRecord(id=address.id, user_id=address.user_id, is_default=address.is_default)

    def get(self, address_id: str) -> AddressModel | None:
        return self.db.get(AddressModel, address_id)

    def list_for_user(self, user_id: str) -> List[AddressModel]:
        return self.db.execute(
            select(AddressModel)
            .where(AddressModel.user_id == user_id)
            .order_by(AddressModel.is_default.desc(), AddressModel.id)
        ).scalars().all()

    def add(self, address: AddressModel) -> AddressModel:
        self.db.add(address)
        self.db.flush()
        return address

    def unset_defaults(self, user_id: str, exclude_id: str | None = None) -> int:
        query = self.db.query(AddressModel).filter(
            AddressModel.user_id == user_id,
            AddressModel.is_default == True,  # noqa: E712
        )
        if exclude_id is not None:
            query = query.filter(AddressModel.id != exclude_id)
        return query.update({AddressModel.is_default: False}, synchronize_session="evaluate")

    def count_orders(self, address_id: str) -> int:
        return self.db.execute(
            select(func.count(OrderModel.id)).where(OrderModel.address_id == address_id)
        ).scalar_one()

    def delete(self, address: AddressModel) -> None:
        self.db.delete(address)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
