"""角色 CRUD：管理角色实体的常用操作。"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from phone_api.packages.inventory.crud.base import CRUDBase
from phone_api.packages.inventory.models.role import Role


class CRUDRole(CRUDBase[Role]):
    """提供角色实体的便捷查询方法。"""

    def get_by_name(self, db: Session, name: str) -> Optional[Role]:
        """根据唯一名称查询角色。"""
        return self.query(db).filter(Role.name == name).first()

    def get_all(self, db: Session) -> List[Role]:
        return (
            self.query(db)
            .options(selectinload(Role.permissions))
            .order_by(Role.name.asc())
            .all()
        )


role_crud = CRUDRole(Role)
