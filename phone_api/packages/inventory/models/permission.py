"""权限模型：存储系统中可授权的单项能力。"""

from typing import List

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from phone_api.packages.inventory.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin, role_permissions


class Permission(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """权限实体，名称格式为 ``{resource}.{action}``，可被多个角色复用。"""

    __tablename__ = "permissions"

    name: Mapped[str] = mapped_column(String(100), unique=True, index=True)

    roles: Mapped[List["Role"]] = relationship(
        "Role",
        secondary=role_permissions,
        back_populates="permissions",
    )

    @validates("name")
    def validate_name(self, key: str, value: str) -> str:
        if value is None or not value.strip():
            raise ValueError("Name cannot be empty.")
        return value
