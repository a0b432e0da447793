# storefront/repos/variant_repo.py
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductVariantModel
from storefront.repos.base import VariantRepository


class VariantRepo(VariantRepository):
    def __init__(self, db: Session):
        self.db = db

    def get_variant(self, variant_id: str) -> ProductVariantModel | None:
        return self.db.get(ProductVariantModel, variant_id)

    def decrement_stock(self, variant_id: str, quantity: int) -> bool:
        # UPDATE product_variants SET stock = stock - :q WHERE id = :id AND stock >= :q
        rowcount = (
            self.db.query(ProductVariantModel)
            .filter(
                ProductVariantModel.id == variant_id,
                ProductVariantModel.stock >= quantity,
            )
            .update(
                {ProductVariantModel.stock: ProductVariantModel.stock - quantity},
                synchronize_session=False,
            )
        )
        return rowcount == 1
