from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from storefront.data.models.product import ProductModel
from storefront.data.models.wishlist import WishlistItemModel


class WishlistRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_for_user(self, user_id: str) -> List[WishlistItemModel]:
        return self.db.execute(
            select(WishlistItemModel)
            .where(WishlistItemModel.user_id == user_id)
            .options(selectinload(WishlistItemModel.product))
            .order_by(WishlistItemModel.created_at.desc())
        ).scalars().all()

    def get(self, user_id: str, product_id: str) -> WishlistItemModel | None:
        return self.db.execute(
            select(WishlistItemModel).where(
                WishlistItemModel.user_id == user_id,
                WishlistItemModel.product_id == product_id,
            )
        ).scalar_one_or_none()

    def get_product(self, product_id: str) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def add(self, item: WishlistItemModel) -> WishlistItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def delete(self, item: WishlistItemModel) -> None:
        self.db.delete(item)

    def delete_for_product(self, user_id: str, product_id: str) -> int:
        return (
            self.db.query(WishlistItemModel)
            .filter(
                WishlistItemModel.user_id == user_id,
                WishlistItemModel.product_id == product_id,
            )
            .delete(synchronize_session=False)
        )

    def commit(self) -> None:
        self.db.commit()
