"""常量定义：集中维护状态码、默认账号以及通用提示文案。"""

HTTP_STATUS_BAD_REQUEST = 400
HTTP_STATUS_UNAUTHORIZED = 401
HTTP_STATUS_NOT_FOUND = 404
HTTP_STATUS_CONFLICT = 409

ACCESS_TOKEN_TYPE = "bearer"
PERMISSIONS_CLAIM = "permissions"

ADMIN_ROLE = "admin"
ADMIN_ROLE_DESCRIPTION = "Full access to every protected endpoint"
DEFAULT_ADMIN_USERNAME = "admin"

# 角色 -> 权限缓存键前缀
USER_ROLES_CACHE_PREFIX = "user_"
ROLE_PERMISSIONS_CACHE_PREFIX = "role_"

MSG_UNAUTHORIZED = "Unauthorized: No valid token provided."
MSG_INVALID_ID = "Invalid id."
MSG_INVALID_REQUEST = "Invalid request data."
MSG_INTERNAL_ERROR = "Internal server error."
