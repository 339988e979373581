"""角色模型：定义用户可被赋予的角色及其关联关系。"""

from typing import List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from phone_api.packages.inventory.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin, role_permissions


class Role(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """角色实体，汇集权限；一个角色可分配给多个用户。"""

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    description: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    users: Mapped[List["User"]] = relationship("User", back_populates="role")
    permissions: Mapped[List["Permission"]] = relationship(
        "Permission",
        secondary=role_permissions,
        back_populates="roles",
    )

    @validates("name")
    def validate_name(self, key: str, value: str) -> str:
        if value is None or not value.strip():
            raise ValueError("Role name cannot be empty.")
        return value
