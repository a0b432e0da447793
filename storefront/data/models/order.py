from sqlalchemy import Column, String, ForeignKey, DateTime, Numeric
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models._ids import new_id, utcnow


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    address_id = Column(String(36), ForeignKey("addresses.id"), nullable=False)

    status = Column(String(20), nullable=False, default="PENDING")  # PENDING, CONFIRMED, SHIPPED, DELIVERED, CANCELLED
    payment_method = Column(String(10), nullable=False, default="COD")
    payment_status = Column(String(10), nullable=False, default="UNPAID")  # UNPAID, PAID
    tracking_number = Column(String(100), nullable=True)
    total_amount = Column(Numeric(10, 2), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
    )
    address = relationship("AddressModel")
    user = relationship("UserModel")
