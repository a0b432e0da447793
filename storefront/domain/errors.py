"""
Storefront domain exceptions.
"""


class StorefrontError(Exception):
    """Base exception for the storefront domain."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class Unauthorized(StorefrontError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="UNAUTHORIZED")


class Forbidden(StorefrontError):
    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, code="FORBIDDEN")


class NotFound(StorefrontError):
    """Raised when a resource is missing or not visible to the caller."""

    def __init__(self, message: str):
        super().__init__(message, code="NOT_FOUND")


class ValidationFailed(StorefrontError):
    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class InvalidAddress(StorefrontError):
    """Raised when the delivery address is missing or belongs to someone else."""

    def __init__(self, message: str = "Invalid address"):
        super().__init__(message, code="INVALID_ADDRESS")


class EmptyCart(StorefrontError):
    def __init__(self):
        super().__init__("Cart is empty", code="EMPTY_CART")


class InsufficientStock(StorefrontError):
    """Raised when a cart line asks for more units than the variant has."""

    def __init__(self, variant_id: str, color: str, size: str, requested: int, available: int):
        super().__init__(
            message=f"Not enough stock for {color} {size}. Available: {available}",
            code="INSUFFICIENT_STOCK",
        )
        self.variant_id = variant_id
        self.requested = requested
        self.available = available


class OrderPlacementFailed(StorefrontError):
    """Raised when the checkout transaction was aborted and rolled back."""

    def __init__(self, message: str = "Order could not be placed, please try again"):
        super().__init__(message, code="ORDER_PLACEMENT_FAILED")


class OrderNotFound(StorefrontError):
    def __init__(self, order_id: str):
        super().__init__("Order not found", code="ORDER_NOT_FOUND")
        self.order_id = order_id


class InvalidTransition(StorefrontError):
    """Raised when an order status change is not allowed from the current status."""

    def __init__(self, current: str, requested: str, message: str | None = None):
        super().__init__(
            message or f"Cannot transition from {current} to {requested}",
            code="INVALID_TRANSITION",
        )
        self.current = current
        self.requested = requested


class TrackingNumberNotAllowed(StorefrontError):
    def __init__(self, requested: str):
        super().__init__(
            f"Tracking number can only be set when moving an order to SHIPPED, not {requested}",
            code="TRACKING_NUMBER_NOT_ALLOWED",
        )
        self.requested = requested


class StockConflict(StorefrontError):
    """Raised inside a unit of work when a conditional stock decrement matched no row."""

    def __init__(self, variant_id: str, quantity: int):
        super().__init__(
            f"Stock for variant {variant_id} changed while placing the order",
            code="STOCK_CONFLICT",
        )
        self.variant_id = variant_id
        self.quantity = quantity


class CartChanged(StorefrontError):
    """Raised inside a unit of work when the cart no longer holds the items that were priced."""

    def __init__(self, cart_id: str, expected: int, removed: int):
        super().__init__(
            f"Cart {cart_id} changed while placing the order: expected {expected} item(s), removed {removed}",
            code="CART_CHANGED",
        )
        self.cart_id = cart_id
        self.expected = expected
        self.removed = removed
