# storefront/api/routers/checkout.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import (
    get_current_principal,
    get_lock_service,
    get_notification_service,
    get_uow,
)
from storefront.domain.entities import Principal
from storefront.domain.errors import EmptyCart, InsufficientStock, InvalidAddress, OrderPlacementFailed
from storefront.domain.schemas import CheckoutIn, CheckoutOut
from storefront.repos.unit_of_work import SqlUnitOfWork
from storefront.services.checkout_service import CheckoutService
from storefront.services.lock_service import LockService
from storefront.services.notification_service import NotificationService

router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.post("", response_model=CheckoutOut, status_code=201)
def place_order(
    payload: CheckoutIn,
    principal: Principal = Depends(get_current_principal),
    uow: SqlUnitOfWork = Depends(get_uow),
    lock_service: LockService = Depends(get_lock_service),
    notification_service: NotificationService = Depends(get_notification_service),
):
    """
    Converts the caller's cart into a cash-on-delivery order.
    """
    svc = CheckoutService(uow, lock_service=lock_service, notification_service=notification_service)
    try:
        order_id = svc.place_order(principal, payload.address_id)
    except (InvalidAddress, EmptyCart, InsufficientStock) as e:
        raise HTTPException(status_code=400, detail=e.message)
    except OrderPlacementFailed as e:
        raise HTTPException(status_code=409, detail=e.message)
    return {"order_id": order_id}
