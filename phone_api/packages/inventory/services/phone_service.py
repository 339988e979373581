"""手机服务：封装手机的查询、增删改与审核逻辑。"""

from __future__ import annotations

import uuid
from typing import Any, Optional

from sqlalchemy.orm import Session

from phone_api.packages.inventory.core.constants import HTTP_STATUS_BAD_REQUEST, HTTP_STATUS_NOT_FOUND
from phone_api.packages.inventory.core.enums import ModerationStatusEnum
from phone_api.packages.inventory.core.exceptions import AppException
from phone_api.packages.inventory.core.logger import logger
from phone_api.packages.inventory.core.responses import create_response
from phone_api.packages.inventory.crud.brands import brand_crud
from phone_api.packages.inventory.crud.phones import phone_crud
from phone_api.packages.inventory.models.phone import Phone

MSG_PHONE_NOT_FOUND = "Phone not found."
MSG_BRAND_NOT_FOUND = "Brand not found."


class PhoneService:
    """聚合手机管理相关的业务能力。"""

    def get_paged(self, db: Session, *, keyword: Optional[str], skip: int, take: int) -> dict:
        items, total = phone_crud.list_paged(db, keyword=keyword, skip=skip, limit=take)
        payload = {
            "data": [self._serialize(item) for item in items],
            "total_records": total,
        }
        return create_response("Phones retrieved successfully.", payload)

    def get_by_id(self, db: Session, *, phone_id: uuid.UUID) -> dict:
        phone = self._get_or_404(db, phone_id)
        return create_response("Phone retrieved successfully.", self._serialize(phone))

    def create(
        self,
        db: Session,
        *,
        model: str,
        price,
        stock: int,
        brand_id: Optional[uuid.UUID] = None,
    ) -> dict:
        self._assert_brand_exists(db, brand_id)
        phone = phone_crud.create(
            db,
            {
                "model": model,
                "price": price,
                "stock": stock,
                "brand_id": brand_id,
                "moderation_status": int(ModerationStatusEnum.REJECTED),
            },
        )
        logger.info("Phone %s created", phone.id)
        return create_response("Phone added successfully.", phone.id)

    def update(
        self,
        db: Session,
        *,
        phone_id: uuid.UUID,
        model: str,
        price,
        stock: int,
        brand_id: Optional[uuid.UUID] = None,
    ) -> dict:
        phone = self._get_or_404(db, phone_id)
        self._assert_brand_exists(db, brand_id)
        phone.model = model
        phone.price = price
        phone.stock = stock
        phone.brand_id = brand_id
        phone_crud.save(db, phone)
        return create_response("Phone updated successfully.", phone.id)

    def delete(self, db: Session, *, phone_id: uuid.UUID) -> dict:
        phone = self._get_or_404(db, phone_id)
        phone_crud.delete(db, phone)
        logger.info("Phone %s deleted", phone_id)
        return create_response("Phone deleted successfully.", phone_id)

    def approve(self, db: Session, *, phone_id: uuid.UUID) -> dict:
        self._set_status(db, phone_id, ModerationStatusEnum.APPROVED)
        return create_response("Phone approved successfully.", phone_id)

    def reject(self, db: Session, *, phone_id: uuid.UUID) -> dict:
        self._set_status(db, phone_id, ModerationStatusEnum.REJECTED)
        return create_response("Phone rejected successfully.", phone_id)

    def _set_status(self, db: Session, phone_id: uuid.UUID, status: ModerationStatusEnum) -> None:
        phone = self._get_or_404(db, phone_id)
        phone.moderation_status = int(status)
        phone_crud.save(db, phone)
        logger.info("Phone %s moderation status set to %s", phone_id, status.name)

    @staticmethod
    def _get_or_404(db: Session, phone_id: uuid.UUID) -> Phone:
        phone = phone_crud.get(db, phone_id)
        if phone is None:
            raise AppException(MSG_PHONE_NOT_FOUND, HTTP_STATUS_NOT_FOUND)
        return phone

    @staticmethod
    def _assert_brand_exists(db: Session, brand_id: Optional[uuid.UUID]) -> None:
        if brand_id is not None and brand_crud.get(db, brand_id) is None:
            raise AppException(MSG_BRAND_NOT_FOUND, HTTP_STATUS_BAD_REQUEST)

    @staticmethod
    def _serialize(phone: Phone) -> dict[str, Any]:
        status = ModerationStatusEnum(phone.moderation_status)
        return {
            "id": phone.id,
            "model": phone.model,
            "price": float(phone.price),
            "stock": phone.stock,
            "created": phone.created,
            "last_modified": phone.last_modified,
            "moderation_status": int(status),
            "moderation_status_txt": status.label,
            "brand_id": phone.brand_id,
            "brand_name": phone.brand.name if phone.brand is not None else None,
        }


phone_service = PhoneService()
