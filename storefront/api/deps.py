# storefront/api/deps.py
from typing import Optional

from fastapi import Depends, Header, HTTPException
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.entities import Principal
from storefront.repos.user_repo import UserRepo
from storefront.repos.unit_of_work import SqlUnitOfWork
from storefront.services.lock_service import LockService
from storefront.services.notification_service import NotificationService
from storefront.utils.settings import JWT_SECRET, JWT_ALGORITHM


def get_current_principal(
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
) -> Principal:
    """Resolve the bearer token into the calling user. Tokens are issued elsewhere."""
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Unauthorized")

    token = authorization.split(" ", 1)[1]
    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token")

    principal = UserRepo(db).get_principal(user_id)
    if not principal:
        raise HTTPException(status_code=401, detail="Unauthorized")

    return principal


def get_optional_principal(
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
) -> Optional[Principal]:
    """Like get_current_principal for public endpoints: no or unusable token means anonymous."""
    if not authorization:
        return None
    try:
        return get_current_principal(authorization, db)
    except HTTPException:
        return None


def get_uow(db: Session = Depends(get_db)) -> SqlUnitOfWork:
    return SqlUnitOfWork(db)


def get_lock_service() -> LockService:
    return LockService()


def get_notification_service() -> NotificationService:
    return NotificationService()
