"""权限 CRUD：管理权限实体的常用数据库操作。"""

import uuid
from typing import List

from sqlalchemy.orm import Session

from phone_api.packages.inventory.crud.base import CRUDBase
from phone_api.packages.inventory.models.base import role_permissions
from phone_api.packages.inventory.models.permission import Permission


class CRUDPermission(CRUDBase[Permission]):
    """封装权限实体的查询逻辑，避免在业务层重复编写。"""

    def get_all(self, db: Session) -> List[Permission]:
        return self.query(db).order_by(Permission.name.asc()).all()

    def names_for_role(self, db: Session, role_id: uuid.UUID) -> List[str]:
        """通过关联表查询角色持有的权限名称。"""
        rows = (
            db.query(Permission.name)
            .join(role_permissions, role_permissions.c.permission_id == Permission.id)
            .filter(role_permissions.c.role_id == role_id)
            .all()
        )
        return [row[0] for row in rows]


permission_crud = CRUDPermission(Permission)
