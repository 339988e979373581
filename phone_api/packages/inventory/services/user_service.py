"""用户管理服务：封装用户的增删改查与角色分配。"""

from __future__ import annotations

import uuid
from typing import Any, Optional

from sqlalchemy.orm import Session

from phone_api.packages.inventory.core.constants import (
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_CONFLICT,
    HTTP_STATUS_NOT_FOUND,
)
from phone_api.packages.inventory.core.exceptions import AppException
from phone_api.packages.inventory.core.logger import logger
from phone_api.packages.inventory.core.responses import create_response
from phone_api.packages.inventory.core.security import get_password_hash
from phone_api.packages.inventory.crud.roles import role_crud
from phone_api.packages.inventory.crud.users import user_crud
from phone_api.packages.inventory.models.user import User

MSG_USER_NOT_FOUND = "User not found."


class UserService:
    """聚合用户管理相关的业务能力。"""

    def list_users(self, db: Session) -> dict:
        items = [self.serialize(user) for user in user_crud.get_all(db)]
        return create_response("Users retrieved successfully.", items)

    def get_by_id(self, db: Session, *, user_id: uuid.UUID) -> dict:
        user = self._get_or_404(db, user_id)
        return create_response("User retrieved successfully.", self.serialize(user))

    def create(
        self,
        db: Session,
        *,
        user_name: str,
        email: str,
        password: str,
        role_id: Optional[uuid.UUID] = None,
    ) -> dict:
        if user_crud.get_by_email(db, email) is not None:
            raise AppException("Email already exists.", HTTP_STATUS_CONFLICT)
        if role_id is not None and role_crud.get(db, role_id) is None:
            raise AppException("Role not found.", HTTP_STATUS_BAD_REQUEST)

        user = user_crud.create(
            db,
            {
                "user_name": user_name,
                "email": email,
                "hashed_password": get_password_hash(password),
                "role_id": role_id,
            },
        )
        logger.info("User %s created", user.email)
        return create_response("User created successfully.", user.id)

    def update(
        self,
        db: Session,
        *,
        user_id: uuid.UUID,
        user_name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> dict:
        user = self._get_or_404(db, user_id)
        if email is not None and email != user.email:
            existing = user_crud.get_by_email(db, email)
            if existing is not None and existing.id != user.id:
                raise AppException("Email already exists.", HTTP_STATUS_CONFLICT)
            user.email = email
        if user_name is not None:
            user.user_name = user_name.strip()
        if password:
            user.hashed_password = get_password_hash(password)
        user_crud.save(db, user)
        return create_response("User updated successfully.", user.id)

    def delete(self, db: Session, *, user_id: uuid.UUID) -> dict:
        user = self._get_or_404(db, user_id)
        user_crud.delete(db, user)
        logger.info("User %s deleted", user_id)
        return create_response("User deleted successfully.", user_id)

    def assign_role(self, db: Session, *, user_id: uuid.UUID, role_id: uuid.UUID) -> dict:
        """为用户分配角色；已缓存的角色列表在过期前不会反映此次变更。"""
        user = self._get_or_404(db, user_id)
        role = role_crud.get(db, role_id)
        if role is None:
            raise AppException("Role not found.", HTTP_STATUS_NOT_FOUND)
        user.role_id = role.id
        user_crud.save(db, user)
        logger.info("Role %s assigned to user %s", role.name, user.email)
        return create_response("Role assigned successfully.", user.id)

    @staticmethod
    def _get_or_404(db: Session, user_id: uuid.UUID) -> User:
        user = user_crud.get(db, user_id)
        if user is None:
            raise AppException(MSG_USER_NOT_FOUND, HTTP_STATUS_NOT_FOUND)
        return user

    @staticmethod
    def serialize(user: User) -> dict[str, Any]:
        return {
            "id": user.id,
            "user_name": user.user_name,
            "email": user.email,
            "role_id": user.role_id,
            "role_name": user.role.name if user.role is not None else None,
            "created": user.created,
            "last_modified": user.last_modified,
            "moderation_status": user.moderation_status,
        }


user_service = UserService()
