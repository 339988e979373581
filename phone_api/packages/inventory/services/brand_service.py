"""品牌服务：品牌的增删改查；仍被手机引用的品牌不可删除。"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy.orm import Session

from phone_api.packages.inventory.core.constants import HTTP_STATUS_CONFLICT, HTTP_STATUS_NOT_FOUND
from phone_api.packages.inventory.core.exceptions import AppException
from phone_api.packages.inventory.core.responses import create_response
from phone_api.packages.inventory.crud.brands import brand_crud
from phone_api.packages.inventory.crud.phones import phone_crud
from phone_api.packages.inventory.models.brand import Brand


class BrandService:
    def get_all(self, db: Session) -> dict:
        items = [self._serialize(item) for item in brand_crud.get_all(db)]
        return create_response("Brands retrieved successfully.", items)

    def get_by_id(self, db: Session, *, brand_id: uuid.UUID) -> dict:
        brand = self._get_or_404(db, brand_id)
        return create_response("Brand retrieved successfully.", self._serialize(brand))

    def create(self, db: Session, *, name: str) -> dict:
        brand = brand_crud.create(db, {"name": name})
        return create_response("Brand added successfully.", brand.id)

    def update(self, db: Session, *, brand_id: uuid.UUID, name: str) -> dict:
        brand = self._get_or_404(db, brand_id)
        brand.name = name
        brand_crud.save(db, brand)
        return create_response("Brand updated successfully.", brand.id)

    def delete(self, db: Session, *, brand_id: uuid.UUID) -> dict:
        brand = self._get_or_404(db, brand_id)
        if phone_crud.count_by_brand(db, brand_id):
            raise AppException("Brand is still referenced by phones.", HTTP_STATUS_CONFLICT)
        brand_crud.delete(db, brand)
        return create_response("Brand deleted successfully.", brand_id)

    @staticmethod
    def _get_or_404(db: Session, brand_id: uuid.UUID) -> Brand:
        brand = brand_crud.get(db, brand_id)
        if brand is None:
            raise AppException("Brand not found.", HTTP_STATUS_NOT_FOUND)
        return brand

    @staticmethod
    def _serialize(brand: Brand) -> dict[str, Any]:
        return {
            "id": brand.id,
            "name": brand.name,
            "created": brand.created,
            "last_modified": brand.last_modified,
            "moderation_status": brand.moderation_status,
        }


brand_service = BrandService()
