"""用户模型：描述系统中的账号及其所属角色。"""

import uuid
from typing import Optional

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from phone_api.packages.inventory.models.base import Base, ModerationMixin, TimestampMixin, UUIDPrimaryKeyMixin


class User(UUIDPrimaryKeyMixin, TimestampMixin, ModerationMixin, Base):
    """用户实体，最多关联一个角色；角色仍有用户时不允许删除。"""

    __tablename__ = "users"

    user_name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255))
    role_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("roles.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )

    role: Mapped[Optional["Role"]] = relationship("Role", back_populates="users")
