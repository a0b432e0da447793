from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_principal
from storefront.data.database import get_db
from storefront.domain.entities import Principal
from storefront.domain.errors import NotFound, ValidationFailed
from storefront.domain.schemas import AccountIn, AccountOut
from storefront.services.account_service import AccountService

router = APIRouter(prefix="/account", tags=["account"])


@router.get("", response_model=AccountOut)
def get_account(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    try:
        return AccountService(db).get_profile(principal)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.put("", response_model=AccountOut)
def update_account(
    payload: AccountIn,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    try:
        return AccountService(db).update_profile(principal, payload.name, payload.phone)
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.message)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
