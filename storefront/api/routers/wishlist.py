from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_principal
from storefront.data.database import get_db
from storefront.domain.entities import Principal
from storefront.domain.errors import NotFound
from storefront.domain.schemas import SuccessOut, WishlistIn, WishlistOut, WishlistToggleOut
from storefront.services.wishlist_service import WishlistService

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@router.get("", response_model=WishlistOut)
def list_wishlist(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return {"items": WishlistService(db).list_items(principal)}


@router.post("", response_model=WishlistToggleOut)
def toggle_wishlist(
    payload: WishlistIn,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """
    Adds the product (201) or removes it when already wishlisted (200).
    """
    try:
        wishlisted = WishlistService(db).toggle(principal, payload.product_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    return JSONResponse(
        status_code=201 if wishlisted else 200,
        content={"wishlisted": wishlisted},
    )


@router.delete("", response_model=SuccessOut)
def remove_from_wishlist(
    product_id: str = Query(..., alias="productId"),
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    WishlistService(db).remove(principal, product_id)
    return {"success": True}
