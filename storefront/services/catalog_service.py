from typing import Any, Dict, List

from sqlalchemy.orm import Session

from storefront.domain.entities import Principal
from storefront.domain.errors import NotFound
from storefront.repos.catalog_repo import CatalogRepo
from storefront.services.wishlist_service import WishlistService

SIMILAR_PRODUCTS_LIMIT = 4


class CatalogService:
    def __init__(self, db: Session):
        self.repo = CatalogRepo(db)
        self.wishlist = WishlistService(db)

    def get_product(self, slug: str, principal: Principal | None = None) -> Dict[str, Any]:
        """
        Product page data: the product with its variants (by color, then size)
        and category, whether the caller wishlisted it, and up to four active
        products from the same category.
        """
        product = self.repo.get_product_by_slug(slug)
        if not product:
            raise NotFound("Product not found")

        variants = sorted(product.variants, key=lambda v: (v.color, v.size))

        return {
            "product": {
                "id": product.id,
                "name": product.name,
                "slug": product.slug,
                "brand": product.brand,
                "base_price": product.base_price,
                "selling_price": product.selling_price,
                "status": product.status,
                "category": product.category,
                "variants": variants,
            },
            "is_wishlisted": self.wishlist.is_wishlisted(principal, product.id),
            "similar_products": self.repo.similar_products(product, limit=SIMILAR_PRODUCTS_LIMIT),
        }

    def list_categories(self) -> List[Dict[str, Any]]:
        return [
            {
                "id": category.id,
                "name": category.name,
                "slug": category.slug,
                "parent": category.parent,
                "product_count": count,
            }
            for category, count in self.repo.list_subcategories()
        ]
