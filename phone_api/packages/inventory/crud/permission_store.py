"""基于 SQLAlchemy 会话的权限存储，为数据库权限解析器提供查询。"""

import uuid

from sqlalchemy.orm import Session

from phone_api.packages.inventory.crud.permissions import permission_crud
from phone_api.packages.inventory.crud.users import user_crud


class SqlPermissionStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def role_ids_for_user(self, user_id: uuid.UUID) -> list[uuid.UUID]:
        return user_crud.role_ids_for_user(self.db, user_id)

    def permission_names_for_role(self, role_id: uuid.UUID) -> list[str]:
        return permission_crud.names_for_role(self.db, role_id)
