"""手机模型：库存中的单个机型，可选关联品牌。"""

import uuid
from decimal import Decimal
from typing import Optional

from sqlalchemy import ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from phone_api.packages.inventory.models.base import Base, ModerationMixin, TimestampMixin, UUIDPrimaryKeyMixin


class Phone(UUIDPrimaryKeyMixin, TimestampMixin, ModerationMixin, Base):
    """手机实体；品牌被引用期间不可删除。"""

    __tablename__ = "phones"

    model: Mapped[str] = mapped_column(String(100), index=True)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2))
    stock: Mapped[int] = mapped_column(Integer, default=0)
    brand_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("brands.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )

    brand: Mapped[Optional["Brand"]] = relationship("Brand", lazy="joined")
