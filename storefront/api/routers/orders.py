# storefront/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_principal, get_notification_service, get_uow
from storefront.data.database import get_db
from storefront.domain.entities import Principal
from storefront.domain.errors import Forbidden, InvalidTransition, NotFound, OrderNotFound
from storefront.domain.schemas import OrderDetailOut, OrderListOut, SuccessOut
from storefront.repos.unit_of_work import SqlUnitOfWork
from storefront.services.notification_service import NotificationService
from storefront.services.order_service import OrderService
from storefront.services.order_status_service import OrderStatusService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=OrderListOut)
def list_orders(
    page: int = Query(1),
    limit: int = Query(10),
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """
    Order history of the caller, newest first.
    """
    return OrderService(db).list_my_orders(principal, page=page, limit=limit)


@router.get("/{order_id}", response_model=OrderDetailOut)
def get_order(
    order_id: str,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    try:
        return OrderService(db).get_my_order(principal, order_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("/{order_id}/cancel", response_model=SuccessOut)
def cancel_order(
    order_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: SqlUnitOfWork = Depends(get_uow),
    notification_service: NotificationService = Depends(get_notification_service),
):
    svc = OrderStatusService(uow, notification_service=notification_service)
    try:
        svc.cancel_own_order(principal, order_id)
    except OrderNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Forbidden as e:
        raise HTTPException(status_code=403, detail=e.message)
    except InvalidTransition as e:
        raise HTTPException(status_code=400, detail=e.message)
    return {"success": True}
