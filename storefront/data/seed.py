# storefront/data/seed.py
from decimal import Decimal

from storefront.data.database import SessionLocal, init_db
from storefront.data.models import CategoryModel, ProductModel, ProductVariantModel, UserModel
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CATEGORIES = [
    {"name": "T-Shirts", "slug": "men-t-shirts"},
    {"name": "Trousers", "slug": "men-trousers"},
    {"name": "Jackets", "slug": "men-jackets"},
]

PRODUCTS = [
    {"name": "Classic Cotton Tee", "slug": "classic-cotton-tee", "category": "men-t-shirts", "brand": "Basics", "base_price": "999", "selling_price": "599"},
    {"name": "Slim Fit Chinos", "slug": "slim-fit-chinos", "category": "men-trousers", "brand": "Urban", "base_price": "1799", "selling_price": "1299"},
    {"name": "Denim Jacket", "slug": "denim-jacket", "category": "men-jackets", "brand": "Urban", "base_price": "2499", "selling_price": "1799"},
]

SIZES = ["S", "M", "L", "XL"]
COLORS = [("Black", "#000000"), ("Navy", "#1f2a44")]


def seed():
    init_db()
    db = SessionLocal()
    try:
        # only seed an empty database
        if db.query(ProductModel).first():
            return

        db.add(UserModel(email="admin@example.com", name="Admin", role="ADMIN"))
        db.add(UserModel(email="customer@example.com", name="Customer", role="CUSTOMER"))

        men = CategoryModel(name="Men", slug="men")
        categories = {
            data["slug"]: CategoryModel(name=data["name"], slug=data["slug"], parent=men)
            for data in CATEGORIES
        }
        db.add(men)

        for data in PRODUCTS:
            product = ProductModel(
                name=data["name"],
                slug=data["slug"],
                category=categories[data["category"]],
                brand=data["brand"],
                base_price=Decimal(data["base_price"]),
                selling_price=Decimal(data["selling_price"]),
                status="ACTIVE",
            )
            product.variants = [
                ProductVariantModel(size=size, color=color, color_hex=hex_, stock=10)
                for size in SIZES
                for color, hex_ in COLORS
            ]
            db.add(product)

        db.commit()
        logger.info(f"Seeded {len(PRODUCTS)} products")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
