# storefront/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_principal
from storefront.data.database import get_db
from storefront.domain.entities import Principal
from storefront.domain.errors import NotFound, ValidationFailed
from storefront.domain.schemas import CartItemIn, CartItemUpdateIn, CartOut, SuccessOut
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=CartOut)
def get_cart(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return get_service(db).get_cart(principal)


@router.post("", response_model=SuccessOut, status_code=201)
def add_item(
    payload: CartItemIn,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        svc.add_item(principal, payload.variant_id, payload.quantity)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.message)
    return {"success": True}


@router.put("/{item_id}", response_model=SuccessOut)
def update_item(
    item_id: str,
    payload: CartItemUpdateIn,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        svc.update_item(principal, item_id, payload.quantity)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.message)
    return {"success": True}


@router.delete("/{item_id}", response_model=SuccessOut)
def remove_item(
    item_id: str,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        svc.remove_item(principal, item_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    return {"success": True}
