from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_principal
from storefront.data.database import get_db
from storefront.domain.entities import Principal
from storefront.domain.errors import Forbidden
from storefront.domain.schemas import DashboardOut
from storefront.services.dashboard_service import DashboardService

router = APIRouter(prefix="/admin/dashboard", tags=["admin"])


@router.get("", response_model=DashboardOut)
def get_dashboard(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    try:
        return DashboardService(db).get_stats(principal)
    except Forbidden as e:
        raise HTTPException(status_code=403, detail=e.message)
