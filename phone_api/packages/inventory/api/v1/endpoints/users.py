"""用户相关的路由定义；登录接口无需认证，读取接口要求有效令牌，写入接口仅限管理员。"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from phone_api.packages.inventory.api.v1.schemas.auth import LoginRequest, LoginResponse
from phone_api.packages.inventory.api.v1.schemas.users import (
    UserCreateRequest,
    UserDetailResponse,
    UserListResponse,
    UserMutationResponse,
    UserUpdateRequest,
)
from phone_api.packages.inventory.core.dependencies import ensure_valid_id, get_current_principal, get_db, require_admin
from phone_api.packages.inventory.core.principal import Principal
from phone_api.packages.inventory.services.auth_service import auth_service
from phone_api.packages.inventory.services.user_service import user_service

router = APIRouter(prefix="/User", tags=["users"])


@router.post("/Login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> LoginResponse:
    return auth_service.login(db, email=payload.email, password=payload.password)


@router.get("/GetAll", response_model=UserListResponse)
def list_users(
    db: Session = Depends(get_db),
    _: Principal = Depends(get_current_principal),
) -> UserListResponse:
    return user_service.list_users(db)


@router.get("/GetById/{id}", response_model=UserDetailResponse)
def get_user(
    id: uuid.UUID,
    db: Session = Depends(get_db),
    _: Principal = Depends(get_current_principal),
) -> UserDetailResponse:
    return user_service.get_by_id(db, user_id=ensure_valid_id(id))


@router.post("/Create", response_model=UserMutationResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreateRequest,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
) -> UserMutationResponse:
    return user_service.create(
        db,
        user_name=payload.user_name,
        email=payload.email,
        password=payload.password,
        role_id=payload.role_id,
    )


@router.put("/Update/{id}", response_model=UserMutationResponse)
def update_user(
    id: uuid.UUID,
    payload: UserUpdateRequest,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
) -> UserMutationResponse:
    return user_service.update(
        db,
        user_id=ensure_valid_id(id),
        user_name=payload.user_name,
        email=payload.email,
        password=payload.password,
    )


@router.delete("/Delete/{id}", response_model=UserMutationResponse)
def delete_user(
    id: uuid.UUID,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
) -> UserMutationResponse:
    return user_service.delete(db, user_id=ensure_valid_id(id))


@router.patch("/AssignRole/{user_id}/{role_id}", response_model=UserMutationResponse)
def assign_role(
    user_id: uuid.UUID,
    role_id: uuid.UUID,
    db: Session = Depends(get_db),
    _: Principal = Depends(require_admin),
) -> UserMutationResponse:
    return user_service.assign_role(db, user_id=ensure_valid_id(user_id), role_id=ensure_valid_id(role_id))
