"""枚举定义：约束审核状态等可选值。"""

from enum import IntEnum


class ModerationStatusEnum(IntEnum):
    """审核状态，新建记录默认为未通过审核。"""

    APPROVED = 0
    REJECTED = 1

    @property
    def label(self) -> str:
        return _MODERATION_LABELS[self]


_MODERATION_LABELS = {
    ModerationStatusEnum.APPROVED: "Approved",
    ModerationStatusEnum.REJECTED: "Not approved",
}
