# storefront/repos/cart_repo.py
from decimal import Decimal
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.product import ProductVariantModel
from storefront.domain.entities import CartLine, CartSnapshot
from storefront.repos.base import CartRepository


class CartRepo(CartRepository):
    def __init__(self, db: Session):
        self.db = db

    def load_cart_with_items(self, user_id: str) -> Optional[CartSnapshot]:
        cart = self.db.execute(
            select(CartModel)
            .where(CartModel.user_id == user_id)
            .options(
                selectinload(CartModel.items)
                .selectinload(CartItemModel.variant)
                .selectinload(ProductVariantModel.product)
            )
        ).scalar_one_or_none()

        if not cart:
            return None

        lines = [
            CartLine(
                item_id=item.id,
                variant_id=item.variant_id,
                size=item.variant.size,
                color=item.variant.color,
                stock=item.variant.stock,
                unit_price=Decimal(item.variant.product.selling_price),
                quantity=item.quantity,
            )
            for item in cart.items
        ]
        return CartSnapshot(cart_id=cart.id, user_id=cart.user_id, lines=lines)

    def clear_cart(self, cart_id: str, item_ids: Sequence[str]) -> int:
        if not item_ids:
            return 0
        return (
            self.db.query(CartItemModel)
            .filter(
                CartItemModel.cart_id == cart_id,
                CartItemModel.id.in_(list(item_ids)),
            )
            .delete(synchronize_session=False)
        )

    def get_cart_by_user(self, user_id: str) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.user_id == user_id)
        ).scalar_one_or_none()

    def create_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.flush()
        return cart

    def get_cart_items(self, cart_id: str) -> List[CartItemModel]:
        return self.db.execute(
            select(CartItemModel)
            .where(CartItemModel.cart_id == cart_id)
            .options(
                selectinload(CartItemModel.variant).selectinload(ProductVariantModel.product)
            )
            .order_by(CartItemModel.created_at.desc(), CartItemModel.id)
        ).scalars().all()

    def get_cart_item(self, cart_id: str, variant_id: str) -> CartItemModel | None:
        return self.db.execute(
            select(CartItemModel).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.variant_id == variant_id,
            )
        ).scalar_one_or_none()

    def get_item(self, item_id: str) -> CartItemModel | None:
        return self.db.get(CartItemModel, item_id)

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def delete_cart_item(self, item: CartItemModel) -> None:
        self.db.delete(item)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
