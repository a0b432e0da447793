from typing import Dict, Any

from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.domain.entities import Principal
from storefront.domain.errors import NotFound, ValidationFailed
from storefront.repos.cart_repo import CartRepo
from storefront.repos.variant_repo import VariantRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Shopping cart use cases.
    Commands (add, update, remove) change the cart, get only reads it.
    Stock is checked here but never reserved; checkout checks it again.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.variants = VariantRepo(db)

    # query
    def get_cart(self, principal: Principal) -> Dict[str, Any]:
        cart = self.repo.get_cart_by_user(principal.user_id)

        if not cart:
            return {"items": [], "item_count": 0}

        items = self.repo.get_cart_items(cart.id)

        return {
            "items": [
                {
                    "id": i.id,
                    "quantity": i.quantity,
                    "variant": i.variant,
                    "product": i.variant.product,
                }
                for i in items
            ],
            "item_count": sum(i.quantity for i in items),
        }

    # commands
    def add_item(self, principal: Principal, variant_id: str, quantity: int = 1) -> CartItemModel:
        if quantity < 1:
            raise ValidationFailed("Quantity must be at least 1")

        variant = self.variants.get_variant(variant_id)
        if not variant:
            raise NotFound("Variant not found")

        if variant.stock < quantity:
            raise ValidationFailed("Not enough stock available")

        # cart is created lazily on the first add
        cart = self.repo.get_cart_by_user(principal.user_id)
        if not cart:
            cart = self.repo.create_cart(CartModel(user_id=principal.user_id))
            logger.info(f"Created cart {cart.id} for user {principal.user_id}")

        existing_item = self.repo.get_cart_item(cart.id, variant_id)

        if existing_item:
            new_quantity = existing_item.quantity + quantity
            if new_quantity > variant.stock:
                self.repo.rollback()
                raise ValidationFailed("Not enough stock available")

            logger.info(
                f"Variant {variant_id} already in cart {cart.id}, quantity "
                f"{existing_item.quantity} -> {new_quantity}"
            )
            existing_item.quantity = new_quantity
            item = existing_item
        else:
            logger.info(f"Adding variant {variant_id} to cart {cart.id}")
            item = self.repo.add_cart_item(
                CartItemModel(cart_id=cart.id, variant_id=variant_id, quantity=quantity)
            )

        self.repo.commit()
        return item

    def update_item(self, principal: Principal, item_id: str, quantity: int) -> CartItemModel:
        if not quantity or quantity < 1:
            raise ValidationFailed("Quantity must be at least 1")

        item = self._owned_item(principal, item_id)

        if quantity > item.variant.stock:
            raise ValidationFailed("Not enough stock available")

        item.quantity = quantity
        self.repo.commit()

        logger.info(f"Cart item {item_id} quantity set to {quantity}")
        return item

    def remove_item(self, principal: Principal, item_id: str) -> None:
        item = self._owned_item(principal, item_id)

        self.repo.delete_cart_item(item)
        self.repo.commit()

        logger.info(f"Cart item {item_id} removed")

    def _owned_item(self, principal: Principal, item_id: str) -> CartItemModel:
        item = self.repo.get_item(item_id)
        if not item or item.cart.user_id != principal.user_id:
            raise NotFound("Cart item not found")
        return item
