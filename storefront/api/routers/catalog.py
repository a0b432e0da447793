# storefront/api/routers/catalog.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_optional_principal
from storefront.data.database import get_db
from storefront.domain.entities import Principal
from storefront.domain.errors import NotFound
from storefront.domain.schemas import CategoryListOut, ProductDetailOut
from storefront.services.catalog_service import CatalogService

router = APIRouter(tags=["catalog"])


@router.get("/products/{slug}", response_model=ProductDetailOut)
def get_product(
    slug: str,
    principal: Optional[Principal] = Depends(get_optional_principal),
    db: Session = Depends(get_db),
):
    """
    Public product page; a signed-in caller also learns whether it is wishlisted.
    """
    try:
        return CatalogService(db).get_product(slug, principal)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.get("/categories", response_model=CategoryListOut)
def list_categories(db: Session = Depends(get_db)):
    return {"categories": CatalogService(db).list_categories()}
