from sqlalchemy import Column, String, DateTime

from storefront.data.database import Base
from storefront.data.models._ids import new_id, utcnow


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), nullable=False, unique=True)
    name = Column(String(100), nullable=True)
    phone = Column(String(20), nullable=True)
    role = Column(String(20), nullable=False, default="CUSTOMER")  # CUSTOMER, ADMIN
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
