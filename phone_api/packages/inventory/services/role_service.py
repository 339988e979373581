"""角色管理服务：封装角色的增删改查以及角色-权限关联维护。

角色权限变更不会主动清理权限缓存，已缓存的结果在一个 TTL 周期内仍然生效。
"""

from __future__ import annotations

import uuid
from typing import Any, Optional

from sqlalchemy.orm import Session

from phone_api.packages.inventory.core.constants import HTTP_STATUS_CONFLICT, HTTP_STATUS_NOT_FOUND
from phone_api.packages.inventory.core.exceptions import AppException
from phone_api.packages.inventory.core.logger import logger
from phone_api.packages.inventory.core.responses import create_response
from phone_api.packages.inventory.crud.permissions import permission_crud
from phone_api.packages.inventory.crud.roles import role_crud
from phone_api.packages.inventory.crud.users import user_crud
from phone_api.packages.inventory.models.permission import Permission
from phone_api.packages.inventory.models.role import Role

MSG_ROLE_NOT_FOUND = "Role not found."


class RoleService:
    """聚合角色管理相关的业务能力。"""

    def list_roles(self, db: Session) -> dict:
        items = [self._serialize(role) for role in role_crud.get_all(db)]
        return create_response("Roles retrieved successfully.", items)

    def create(self, db: Session, *, name: str, description: Optional[str] = None) -> dict:
        self._assert_unique_name(db, name)
        role = role_crud.create(db, {"name": name, "description": description})
        logger.info("Role %s created", role.name)
        return create_response("Role created successfully.", role.id)

    def update(self, db: Session, *, role_id: uuid.UUID, name: str, description: Optional[str] = None) -> dict:
        role = self._get_or_404(db, role_id)
        self._assert_unique_name(db, name, exclude_id=role.id)
        role.name = name
        role.description = description
        role_crud.save(db, role)
        return create_response("Role updated successfully.", role.id)

    def delete(self, db: Session, *, role_id: uuid.UUID) -> dict:
        role = self._get_or_404(db, role_id)
        if user_crud.count_by_role(db, role_id):
            raise AppException("Role is still assigned to users.", HTTP_STATUS_CONFLICT)
        # 关联表中的角色-权限记录随角色一同删除
        role_crud.delete(db, role)
        logger.info("Role %s deleted", role_id)
        return create_response("Role deleted successfully.", role_id)

    def add_permission(self, db: Session, *, role_id: uuid.UUID, permission_id: uuid.UUID) -> dict:
        role = self._get_or_404(db, role_id)
        permission = self._get_permission_or_404(db, permission_id)
        if any(item.id == permission.id for item in role.permissions):
            raise AppException("Role already has this permission.", HTTP_STATUS_CONFLICT)
        role.permissions.append(permission)
        role_crud.save(db, role)
        logger.info("Permission %s granted to role %s", permission.name, role.name)
        return create_response("Permission added to role successfully.", role.id)

    def remove_permission(self, db: Session, *, role_id: uuid.UUID, permission_id: uuid.UUID) -> dict:
        role = self._get_or_404(db, role_id)
        permission = next((item for item in role.permissions if item.id == permission_id), None)
        if permission is None:
            raise AppException("Role does not have this permission.", HTTP_STATUS_NOT_FOUND)
        role.permissions.remove(permission)
        role_crud.save(db, role)
        logger.info("Permission %s revoked from role %s", permission.name, role.name)
        return create_response("Permission removed from role successfully.", role.id)

    @staticmethod
    def _assert_unique_name(db: Session, name: str, *, exclude_id: Optional[uuid.UUID] = None) -> None:
        existing = role_crud.get_by_name(db, name)
        if existing is not None and existing.id != exclude_id:
            raise AppException("Role name already exists.", HTTP_STATUS_CONFLICT)

    @staticmethod
    def _get_or_404(db: Session, role_id: uuid.UUID) -> Role:
        role = role_crud.get(db, role_id)
        if role is None:
            raise AppException(MSG_ROLE_NOT_FOUND, HTTP_STATUS_NOT_FOUND)
        return role

    @staticmethod
    def _get_permission_or_404(db: Session, permission_id: uuid.UUID) -> Permission:
        permission = permission_crud.get(db, permission_id)
        if permission is None:
            raise AppException("Permission not found.", HTTP_STATUS_NOT_FOUND)
        return permission

    @staticmethod
    def _serialize(role: Role) -> dict[str, Any]:
        return {
            "id": role.id,
            "name": role.name,
            "description": role.description,
            "permissions": [
                {"id": permission.id, "name": permission.name}
                for permission in sorted(role.permissions, key=lambda item: item.name)
            ],
        }


role_service = RoleService()
