"""认证服务：校验登录凭证并签发访问令牌。"""

from typing import Any, Dict

from sqlalchemy.orm import Session

from phone_api.packages.inventory.core.config import get_settings
from phone_api.packages.inventory.core.constants import (
    ACCESS_TOKEN_TYPE,
    HTTP_STATUS_UNAUTHORIZED,
    PERMISSIONS_CLAIM,
)
from phone_api.packages.inventory.core.exceptions import AppException
from phone_api.packages.inventory.core.logger import logger
from phone_api.packages.inventory.core.permission_resolver import encode_permissions_claim
from phone_api.packages.inventory.core.responses import create_response
from phone_api.packages.inventory.core.security import create_access_token, verify_password
from phone_api.packages.inventory.crud.permissions import permission_crud
from phone_api.packages.inventory.crud.users import user_crud
from phone_api.packages.inventory.models.user import User
from phone_api.packages.inventory.services.user_service import user_service

MSG_BAD_CREDENTIALS = "Invalid email or password."


class AuthService:
    """负责处理登录流程，并保持逻辑聚合。"""

    def login(self, db: Session, *, email: str, password: str) -> dict:
        """校验用户凭证并签发访问令牌。"""
        user = user_crud.get_by_email(db, email)
        if user is None or not verify_password(password, user.hashed_password):
            logger.info("Login failed for %s", email)
            raise AppException(MSG_BAD_CREDENTIALS, HTTP_STATUS_UNAUTHORIZED)

        access_token, expire = create_access_token(self._build_claims(db, user))
        logger.info("User %s logged in", user.email)
        return create_response(
            "Login successful.",
            {
                "access_token": access_token,
                "token_type": ACCESS_TOKEN_TYPE,
                "expire": expire,
                "user": user_service.serialize(user),
            },
        )

    @staticmethod
    def _build_claims(db: Session, user: User) -> Dict[str, Any]:
        claims: Dict[str, Any] = {"sub": str(user.id), "email": user.email}
        if user.role_id is not None:
            claims["role_id"] = str(user.role_id)
        # 仅在以令牌声明作为权限来源时写入权限列表
        if get_settings().permission_source == "claims" and user.role_id is not None:
            claims[PERMISSIONS_CLAIM] = encode_permissions_claim(permission_crud.names_for_role(db, user.role_id))
        return claims


auth_service = AuthService()
