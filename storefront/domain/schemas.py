# storefront/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.domain.order_status import OrderStatus


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class CheckoutIn(CamelModel):
    """Schema for placing an order."""

    address_id: Optional[str] = Field(default=None, description="Delivery address ID")


class OrderStatusIn(CamelModel):
    """Schema for an admin status change."""

    status: OrderStatus
    tracking_number: Optional[str] = Field(default=None, max_length=100)


class CartItemIn(CamelModel):
    variant_id: str = Field(..., min_length=1, description="Variant ID is required")
    quantity: int = 1


class CartItemUpdateIn(CamelModel):
    quantity: int


class AddressIn(CamelModel):
    full_name: str = Field(..., min_length=2)
    phone: str = Field(..., min_length=10, max_length=20)
    address_line1: str = Field(..., min_length=5)
    address_line2: Optional[str] = None
    city: str = Field(..., min_length=2)
    state: str = Field(..., min_length=2)
    pincode: str = Field(..., min_length=6, max_length=6)
    is_default: Optional[bool] = None


class WishlistIn(CamelModel):
    product_id: str = Field(..., min_length=1)


class AccountIn(CamelModel):
    # name length is checked in AccountService
    name: str
    phone: Optional[str] = Field(default=None, max_length=20)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class CheckoutOut(CamelModel):
    order_id: str


class SuccessOut(CamelModel):
    success: bool = True


class ProductBriefOut(CamelModel):
    id: str
    name: str
    slug: str
    brand: Optional[str] = None
    selling_price: Decimal


class VariantOut(CamelModel):
    id: str
    size: str
    color: str
    color_hex: Optional[str] = None
    stock: int


class CartItemOut(CamelModel):
    id: str
    quantity: int
    variant: VariantOut
    product: ProductBriefOut


class CartOut(CamelModel):
    items: List[CartItemOut]
    item_count: int


class AddressOut(CamelModel):
    id: str
    full_name: str
    phone: str
    address_line1: str
    address_line2: Optional[str] = None
    city: str
    state: str
    pincode: str
    is_default: bool


class OrderOut(CamelModel):
    id: str
    user_id: str
    address_id: str
    status: OrderStatus
    payment_method: str
    payment_status: str
    tracking_number: Optional[str] = None
    total_amount: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class OrderVariantOut(CamelModel):
    id: str
    size: str
    color: str
    product: ProductBriefOut


class OrderItemOut(CamelModel):
    id: str
    variant_id: str
    quantity: int
    price: Decimal
    variant: OrderVariantOut


class OrderCustomerOut(CamelModel):
    name: Optional[str] = None
    email: str


class OrderDetailOut(OrderOut):
    items: List[OrderItemOut]
    address: AddressOut


class AdminOrderDetailOut(OrderDetailOut):
    user: OrderCustomerOut


class OrderListOut(CamelModel):
    orders: List[OrderDetailOut]
    total: int
    page: int
    pages: int


class AdminOrderListOut(CamelModel):
    orders: List[AdminOrderDetailOut]
    total: int
    page: int
    pages: int


class WishlistItemOut(CamelModel):
    id: str
    product: ProductBriefOut
    created_at: datetime


class WishlistOut(CamelModel):
    items: List[WishlistItemOut]


class WishlistToggleOut(CamelModel):
    wishlisted: bool


class AccountOut(CamelModel):
    id: str
    name: Optional[str] = None
    email: str
    phone: Optional[str] = None
    created_at: datetime


class CategoryRefOut(CamelModel):
    id: str
    name: str
    slug: str


class ProductCategoryOut(CategoryRefOut):
    parent: Optional[CategoryRefOut] = None


class ProductOut(ProductBriefOut):
    base_price: Decimal
    status: str
    category: Optional[ProductCategoryOut] = None
    variants: List[VariantOut]


class ProductDetailOut(CamelModel):
    product: ProductOut
    is_wishlisted: bool
    similar_products: List[ProductBriefOut]


class CategoryOut(CategoryRefOut):
    parent: Optional[CategoryRefOut] = None
    product_count: int


class CategoryListOut(CamelModel):
    categories: List[CategoryOut]


class DashboardOut(CamelModel):
    total_products: int
    active_products: int
    total_categories: int
    total_orders: int
    pending_orders: int
    total_users: int
    total_revenue: Decimal
