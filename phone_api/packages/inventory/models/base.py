"""模型基类：统一声明式基类、通用审计字段与角色-权限关联表。

本模块集中提供：
- Base：SQLAlchemy 声明式基类，带统一命名约定；
- UUIDPrimaryKeyMixin：`id`（UUID 主键，由应用侧生成）；
- TimestampMixin：`created`、`last_modified`；
- ModerationMixin：`moderation_status`（审核状态，默认未通过）；
- role_permissions：角色与权限的多对多关联表，删除角色时级联删除关联行。
"""

import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, MetaData, Table, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from phone_api.packages.inventory.core.enums import ModerationStatusEnum

convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata_obj = MetaData(naming_convention=convention)


class Base(DeclarativeBase):
    """全局声明式基类，附带一致的命名约定，便于迁移与调试。"""

    metadata = metadata_obj


class UUIDPrimaryKeyMixin:
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    """通用时间戳字段，为记录新增、更新提供审计能力。"""

    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    last_modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class ModerationMixin:
    """审核状态字段，新记录默认处于未通过状态。"""

    moderation_status: Mapped[int] = mapped_column(
        Integer,
        default=int(ModerationStatusEnum.REJECTED),
        nullable=False,
    )


role_permissions = Table(
    "role_permissions",
    Base.metadata,
    Column("role_id", Uuid, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True, index=True),
    Column(
        "permission_id",
        Uuid,
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
    Column("created", DateTime(timezone=True), server_default=func.now(), nullable=False),
)
