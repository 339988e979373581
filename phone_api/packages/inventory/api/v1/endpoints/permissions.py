"""权限目录路由。"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from phone_api.packages.inventory.api.v1.schemas.roles import PermissionListResponse
from phone_api.packages.inventory.core.dependencies import get_current_principal, get_db
from phone_api.packages.inventory.services.permission_service import permission_service

router = APIRouter(prefix="/Permission", tags=["permissions"], dependencies=[Depends(get_current_principal)])


@router.get("/GetAll", response_model=PermissionListResponse)
def list_permissions(db: Session = Depends(get_db)) -> PermissionListResponse:
    return permission_service.list_permissions(db)
