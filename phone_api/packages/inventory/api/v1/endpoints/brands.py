"""品牌相关的路由定义，全部接口均经过权限守卫。"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from phone_api.packages.inventory.api.v1.schemas.brands import (
    BrandDetailResponse,
    BrandListResponse,
    BrandMutationResponse,
    BrandWriteRequest,
)
from phone_api.packages.inventory.core.dependencies import ensure_valid_id, get_db, require_permission
from phone_api.packages.inventory.services.brand_service import brand_service

router = APIRouter(prefix="/Brand", tags=["brands"], dependencies=[Depends(require_permission)])


@router.get("/GetAll", response_model=BrandListResponse)
def get_all(db: Session = Depends(get_db)) -> BrandListResponse:
    return brand_service.get_all(db)


@router.get("/GetById/{id}", response_model=BrandDetailResponse)
def get_by_id(id: uuid.UUID, db: Session = Depends(get_db)) -> BrandDetailResponse:
    return brand_service.get_by_id(db, brand_id=ensure_valid_id(id))


@router.post("/Create", response_model=BrandMutationResponse, status_code=status.HTTP_201_CREATED)
def create_brand(payload: BrandWriteRequest, db: Session = Depends(get_db)) -> BrandMutationResponse:
    return brand_service.create(db, name=payload.name)


@router.put("/Update/{id}", response_model=BrandMutationResponse)
def update_brand(id: uuid.UUID, payload: BrandWriteRequest, db: Session = Depends(get_db)) -> BrandMutationResponse:
    return brand_service.update(db, brand_id=ensure_valid_id(id), name=payload.name)


@router.delete("/Delete/{id}", response_model=BrandMutationResponse)
def delete_brand(id: uuid.UUID, db: Session = Depends(get_db)) -> BrandMutationResponse:
    return brand_service.delete(db, brand_id=ensure_valid_id(id))
