from typing import List

from sqlalchemy.orm import Session

from storefront.data.models.wishlist import WishlistItemModel
from storefront.domain.entities import Principal
from storefront.domain.errors import NotFound
from storefront.repos.wishlist_repo import WishlistRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class WishlistService:
    def __init__(self, db: Session):
        self.repo = WishlistRepo(db)

    def list_items(self, principal: Principal) -> List[WishlistItemModel]:
        return self.repo.list_for_user(principal.user_id)

    def is_wishlisted(self, principal: Principal | None, product_id: str) -> bool:
        if principal is None:
            return False
        return self.repo.get(principal.user_id, product_id) is not None

    def toggle(self, principal: Principal, product_id: str) -> bool:
        """Add the product if absent, remove it if present. Returns whether it is now wishlisted."""
        existing = self.repo.get(principal.user_id, product_id)

        if existing:
            self.repo.delete(existing)
            self.repo.commit()
            logger.info(f"Product {product_id} removed from wishlist of user {principal.user_id}")
            return False

        if not self.repo.get_product(product_id):
            logger.warning(f"Wishlist toggle rejected for user {principal.user_id}: unknown product {product_id}")
            raise NotFound("Product not found")

        self.repo.add(WishlistItemModel(user_id=principal.user_id, product_id=product_id))
        self.repo.commit()
        logger.info(f"Product {product_id} added to wishlist of user {principal.user_id}")
        return True

    def remove(self, principal: Principal, product_id: str) -> None:
        removed = self.repo.delete_for_product(principal.user_id, product_id)
        self.repo.commit()
        logger.info(f"Removed {removed} wishlist entry for product {product_id}, user {principal.user_id}")
