# storefront/api/routers/admin_orders.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_principal, get_notification_service, get_uow
from storefront.data.database import get_db
from storefront.domain.entities import Principal
from storefront.domain.errors import (
    Forbidden,
    InvalidTransition,
    NotFound,
    OrderNotFound,
    TrackingNumberNotAllowed,
)
from storefront.domain.order_status import OrderStatus
from storefront.domain.schemas import AdminOrderDetailOut, AdminOrderListOut, OrderOut, OrderStatusIn
from storefront.repos.unit_of_work import SqlUnitOfWork
from storefront.services.notification_service import NotificationService
from storefront.services.order_service import OrderService
from storefront.services.order_status_service import OrderStatusService

router = APIRouter(prefix="/admin/orders", tags=["admin"])


@router.get("", response_model=AdminOrderListOut)
def list_orders(
    page: int = Query(1),
    status: Optional[OrderStatus] = Query(None),
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    try:
        return OrderService(db).list_all_orders(principal, page=page, status=status)
    except Forbidden as e:
        raise HTTPException(status_code=403, detail=e.message)


@router.get("/{order_id}", response_model=AdminOrderDetailOut)
def get_order(
    order_id: str,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    try:
        return OrderService(db).get_order(principal, order_id)
    except Forbidden as e:
        raise HTTPException(status_code=403, detail=e.message)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.put("/{order_id}", response_model=OrderOut)
def update_order_status(
    order_id: str,
    payload: OrderStatusIn,
    principal: Principal = Depends(get_current_principal),
    uow: SqlUnitOfWork = Depends(get_uow),
    notification_service: NotificationService = Depends(get_notification_service),
):
    """
    Applies an admin status change if the transition graph allows it.
    """
    svc = OrderStatusService(uow, notification_service=notification_service)
    try:
        return svc.update_status(
            principal,
            order_id,
            payload.status,
            tracking_number=payload.tracking_number,
        )
    except Forbidden as e:
        raise HTTPException(status_code=403, detail=e.message)
    except OrderNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except (InvalidTransition, TrackingNumberNotAllowed) as e:
        raise HTTPException(status_code=400, detail=e.message)
