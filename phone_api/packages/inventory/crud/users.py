"""用户 CRUD：集中管理用户相关的数据操作。"""

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from phone_api.packages.inventory.crud.base import CRUDBase
from phone_api.packages.inventory.models.user import User


class CRUDUser(CRUDBase[User]):
    """封装常用的用户查询方法，供业务层复用。"""

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        """根据唯一邮箱获取用户实例，比较时忽略大小写。"""
        return self.query(db).filter(User.email == email.strip().lower()).first()

    def get_all(self, db: Session) -> List[User]:
        return self.query(db).order_by(User.created.asc(), User.email.asc()).all()

    def role_ids_for_user(self, db: Session, user_id: uuid.UUID) -> List[uuid.UUID]:
        """返回用户被分配的角色 ID，未分配或用户不存在时为空列表。"""
        row = db.query(User.role_id).filter(User.id == user_id).first()
        if row is None or row[0] is None:
            return []
        return [row[0]]

    def count_by_role(self, db: Session, role_id: uuid.UUID) -> int:
        return self.query(db).filter(User.role_id == role_id).count()


user_crud = CRUDUser(User)
