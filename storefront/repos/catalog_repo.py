# storefront/repos/catalog_repo.py
from typing import List, Tuple

from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload

from storefront.data.models.category import CategoryModel
from storefront.data.models.product import ProductModel


class CatalogRepo:
    """Read-only catalog queries: product detail, similar products, categories."""

    def __init__(self, db: Session):
        self.db = db

    def get_product_by_slug(self, slug: str) -> ProductModel | None:
        return self.db.execute(
            select(ProductModel)
            .where(ProductModel.slug == slug)
            .options(
                selectinload(ProductModel.variants),
                selectinload(ProductModel.category).selectinload(CategoryModel.parent),
            )
        ).scalar_one_or_none()

    def similar_products(self, product: ProductModel, limit: int = 4) -> List[ProductModel]:
        if product.category_id is None:
            return []
        return self.db.execute(
            select(ProductModel)
            .where(
                ProductModel.category_id == product.category_id,
                ProductModel.status == "ACTIVE",
                ProductModel.id != product.id,
            )
            .order_by(ProductModel.created_at.desc(), ProductModel.id)
            .limit(limit)
        ).scalars().all()

    def list_subcategories(self) -> List[Tuple[CategoryModel, int]]:
        """Categories that have a parent, with their product counts, by name."""
        rows = self.db.execute(
            select(CategoryModel, func.count(ProductModel.id))
            .outerjoin(ProductModel, ProductModel.category_id == CategoryModel.id)
            .where(CategoryModel.parent_id.is_not(None))
            .options(selectinload(CategoryModel.parent))
            .group_by(CategoryModel.id)
            .order_by(CategoryModel.name)
        ).all()
        return [(category, count) for category, count in rows]

    def count_products(self, status: str | None = None) -> int:
        query = select(func.count(ProductModel.id))
        if status is not None:
            query = query.where(ProductModel.status == status)
        return self.db.execute(query).scalar_one()

    def count_categories(self) -> int:
        return self.db.execute(select(func.count(CategoryModel.id))).scalar_one()
