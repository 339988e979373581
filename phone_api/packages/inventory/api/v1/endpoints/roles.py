"""角色管理相关的路由定义；查询需要登录，变更仅限管理员。"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from phone_api.packages.inventory.api.v1.schemas.roles import (
    RoleCreateRequest,
    RoleListResponse,
    RoleMutationResponse,
    RoleUpdateRequest,
)
from phone_api.packages.inventory.core.dependencies import ensure_valid_id, get_current_principal, get_db, require_admin
from phone_api.packages.inventory.core.principal import Principal
from phone_api.packages.inventory.services.role_service import role_service

router = APIRouter(prefix="/Role", tags=["roles"], dependencies=[Depends(get_current_principal)])


@router.get("/GetAll", response_model=RoleListResponse)
def list_roles(db: Session = Depends(get_db)) -> RoleListResponse:
    return role_service.list_roles(db)


@router.post("/Create", response_model=RoleMutationResponse, status_code=status.HTTP_201_CREATED)
def create_role(
    payload: RoleCreateRequest,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
) -> RoleMutationResponse:
    return role_service.create(db, name=payload.name, description=payload.description)


@router.put("/Update/{id}", response_model=RoleMutationResponse)
def update_role(
    id: uuid.UUID,
    payload: RoleUpdateRequest,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
) -> RoleMutationResponse:
    return role_service.update(db, role_id=ensure_valid_id(id), name=payload.name, description=payload.description)


@router.delete("/Delete/{id}", response_model=RoleMutationResponse)
def delete_role(
    id: uuid.UUID,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
) -> RoleMutationResponse:
    return role_service.delete(db, role_id=ensure_valid_id(id))


@router.post("/AddPermission/{role_id}/{permission_id}", response_model=RoleMutationResponse)
def add_permission(
    role_id: uuid.UUID,
    permission_id: uuid.UUID,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
) -> RoleMutationResponse:
    return role_service.add_permission(
        db,
        role_id=ensure_valid_id(role_id),
        permission_id=ensure_valid_id(permission_id),
    )


@router.delete("/RemovePermission/{role_id}/{permission_id}", response_model=RoleMutationResponse)
def remove_permission(
    role_id: uuid.UUID,
    permission_id: uuid.UUID,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
) -> RoleMutationResponse:
    return role_service.remove_permission(
        db,
        role_id=ensure_valid_id(role_id),
        permission_id=ensure_valid_id(permission_id),
    )
