"""品牌模型。"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from phone_api.packages.inventory.models.base import Base, ModerationMixin, TimestampMixin, UUIDPrimaryKeyMixin


class Brand(UUIDPrimaryKeyMixin, TimestampMixin, ModerationMixin, Base):
    __tablename__ = "brands"

    name: Mapped[str] = mapped_column(String(50))
