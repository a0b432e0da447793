from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_principal
from storefront.data.database import get_db
from storefront.domain.entities import Principal
from storefront.domain.errors import NotFound, ValidationFailed
from storefront.domain.schemas import AddressIn, AddressOut, SuccessOut
from storefront.services.address_service import AddressService

router = APIRouter(prefix="/addresses", tags=["addresses"])


@router.get("", response_model=List[AddressOut])
def list_addresses(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return AddressService(db).list_addresses(principal)


@router.post("", response_model=AddressOut, status_code=201)
def create_address(
    payload: AddressIn,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return AddressService(db).create_address(principal, payload.model_dump())


@router.put("/{address_id}", response_model=AddressOut)
def update_address(
    address_id: str,
    payload: AddressIn,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    try:
        return AddressService(db).update_address(principal, address_id, payload.model_dump())
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/{address_id}", response_model=SuccessOut)
def delete_address(
    address_id: str,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    try:
        AddressService(db).delete_address(principal, address_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.message)
    return {"success": True}
