"""模型包初始化，便于统一导入 ORM 实体并触发模型注册。"""

from phone_api.packages.inventory.models.brand import Brand
from phone_api.packages.inventory.models.permission import Permission
from phone_api.packages.inventory.models.phone import Phone
from phone_api.packages.inventory.models.role import Role
from phone_api.packages.inventory.models.user import User

__all__ = [
    "Brand",
    "Permission",
    "Phone",
    "Role",
    "User",
]
