from sqlalchemy import Column, String, Integer, Numeric, ForeignKey, DateTime, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models._ids import new_id, utcnow


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(200), nullable=False)
    slug = Column(String(200), nullable=False, unique=True)
    brand = Column(String(100), nullable=True)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=True, index=True)

    base_price = Column(Numeric(10, 2), nullable=False)
    selling_price = Column(Numeric(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default="ACTIVE")  # DRAFT, ACTIVE, ARCHIVED
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    category = relationship("CategoryModel", back_populates="products")
    variants = relationship(
        "ProductVariantModel",
        back_populates="product",
        cascade="all, delete-orphan",
    )


class ProductVariantModel(Base):
    __tablename__ = "product_variants"

    id = Column(String(36), primary_key=True, default=new_id)
    product_id = Column(String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)

    size = Column(String(10), nullable=False)
    color = Column(String(50), nullable=False)
    color_hex = Column(String(7), nullable=True)
    stock = Column(Integer, nullable=False, default=0)

    product = relationship("ProductModel", back_populates="variants")

    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_variant_stock_non_negative"),
        UniqueConstraint("product_id", "size", "color", name="u_product_size_color"),
    )
