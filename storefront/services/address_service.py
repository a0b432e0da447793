from typing import Any, Dict, List

from sqlalchemy.orm import Session

from storefront.data.models.address import AddressModel
from storefront.domain.entities import Principal
from storefront.domain.errors import NotFound, ValidationFailed
from storefront.repos.address_repo import AddressRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class AddressService:
    """
    Delivery addresses of a user. At most one address per user is the
    default: older defaults are unset before a new one is saved.
    """

    def __init__(self, db: Session):
        self.repo = AddressRepo(db)

    def list_addresses(self, principal: Principal) -> List[AddressModel]:
        return self.repo.list_for_user(principal.user_id)

    def create_address(self, principal: Principal, data: Dict[str, Any]) -> AddressModel:
        is_default = bool(data.pop("is_default", False))

        if is_default:
            self.repo.unset_defaults(principal.user_id)

        address = self.repo.add(
            AddressModel(user_id=principal.user_id, is_default=is_default, **data)
        )
        self.repo.commit()

        logger.info(f"Address {address.id} created for user {principal.user_id}")
        return address

    def update_address(self, principal: Principal, address_id: str, data: Dict[str, Any]) -> AddressModel:
        address = self._owned(principal, address_id)
        is_default = bool(data.pop("is_default", False))

        if is_default:
            self.repo.unset_defaults(principal.user_id, exclude_id=address_id)

        for key, value in data.items():
            setattr(address, key, value)
        address.is_default = is_default

        self.repo.commit()
        return address

    def delete_address(self, principal: Principal, address_id: str) -> None:
        address = self._owned(principal, address_id)

        if self.repo.count_orders(address_id) > 0:
            raise ValidationFailed("Cannot delete address linked to orders")

        self.repo.delete(address)
        self.repo.commit()

        logger.info(f"Address {address_id} deleted")

    def _owned(self, principal: Principal, address_id: str) -> AddressModel:
        address = self.repo.get(address_id)
        if not address or address.user_id != principal.user_id:
            raise NotFound("Address not found")
        return address
