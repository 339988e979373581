"""手机相关的路由定义，全部接口均经过权限守卫。"""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from phone_api.packages.inventory.api.v1.schemas.phones import (
    PhoneCreateRequest,
    PhoneDetailResponse,
    PhoneListResponse,
    PhoneMutationResponse,
    PhoneUpdateRequest,
)
from phone_api.packages.inventory.core.dependencies import ensure_valid_id, get_db, require_permission
from phone_api.packages.inventory.services.phone_service import phone_service

router = APIRouter(prefix="/Phone", tags=["phones"], dependencies=[Depends(require_permission)])


@router.get("/GetPaged", response_model=PhoneListResponse)
def get_paged(
    keyword: Optional[str] = Query(None, description="按型号模糊匹配"),
    skip: int = Query(0, ge=0, description="跳过的记录数"),
    take: int = Query(10, ge=1, le=200, description="返回的记录数"),
    db: Session = Depends(get_db),
) -> PhoneListResponse:
    return phone_service.get_paged(db, keyword=keyword, skip=skip, take=take)


@router.get("/GetById/{id}", response_model=PhoneDetailResponse)
def get_by_id(id: uuid.UUID, db: Session = Depends(get_db)) -> PhoneDetailResponse:
    return phone_service.get_by_id(db, phone_id=ensure_valid_id(id))


@router.post("/Create", response_model=PhoneMutationResponse, status_code=status.HTTP_201_CREATED)
def create_phone(payload: PhoneCreateRequest, db: Session = Depends(get_db)) -> PhoneMutationResponse:
    return phone_service.create(
        db,
        model=payload.model,
        price=payload.price,
        stock=payload.stock,
        brand_id=payload.brand_id,
    )


@router.put("/Update/{id}", response_model=PhoneMutationResponse)
def update_phone(id: uuid.UUID, payload: PhoneUpdateRequest, db: Session = Depends(get_db)) -> PhoneMutationResponse:
    return phone_service.update(
        db,
        phone_id=ensure_valid_id(id),
        model=payload.model,
        price=payload.price,
        stock=payload.stock,
        brand_id=payload.brand_id,
    )


@router.delete("/Delete/{id}", response_model=PhoneMutationResponse)
def delete_phone(id: uuid.UUID, db: Session = Depends(get_db)) -> PhoneMutationResponse:
    return phone_service.delete(db, phone_id=ensure_valid_id(id))


@router.patch("/Approve/{id}", response_model=PhoneMutationResponse)
def approve_phone(id: uuid.UUID, db: Session = Depends(get_db)) -> PhoneMutationResponse:
    return phone_service.approve(db, phone_id=ensure_valid_id(id))


@router.patch("/Reject/{id}", response_model=PhoneMutationResponse)
def reject_phone(id: uuid.UUID, db: Session = Depends(get_db)) -> PhoneMutationResponse:
    return phone_service.reject(db, phone_id=ensure_valid_id(id))
