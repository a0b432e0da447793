from sqlalchemy import Column, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models._ids import new_id, utcnow


class CategoryModel(Base):
    """Two-level catalog tree: top-level groups (Men, Women) hold the categories products belong to."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    slug = Column(String(100), nullable=False, unique=True)
    parent_id = Column(String(36), ForeignKey("categories.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    parent = relationship("CategoryModel", remote_side=[id], back_populates="children")
    children = relationship("CategoryModel", back_populates="parent")
    products = relationship("ProductModel", back_populates="category")
