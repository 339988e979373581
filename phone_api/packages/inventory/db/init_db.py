"""Database bootstrapping utilities."""

from __future__ import annotations

from sqlalchemy.orm import Session

from phone_api.packages.inventory.core.config import get_settings
from phone_api.packages.inventory.core.constants import (
    ADMIN_ROLE,
    ADMIN_ROLE_DESCRIPTION,
    DEFAULT_ADMIN_USERNAME,
)
from phone_api.packages.inventory.core.enums import ModerationStatusEnum
from phone_api.packages.inventory.core.logger import logger
from phone_api.packages.inventory.core.permission_map import all_permission_names
from phone_api.packages.inventory.core.security import get_password_hash
from phone_api.packages.inventory.db import session as db_session
from phone_api.packages.inventory.models import Permission, Role, User
from phone_api.packages.inventory.models.base import Base


def init_db() -> None:
    """Create all database tables if they do not exist and seed baseline data."""
    Base.metadata.create_all(bind=db_session.engine)

    session = db_session.SessionLocal()
    try:
        permissions = _seed_permission_catalog(session)
        admin_role = _seed_admin_role(session, permissions)
        _seed_admin_user(session, admin_role)
        session.commit()
    except Exception:  # pragma: no cover - initialization failures should not crash gracefully
        session.rollback()
        logger.exception("Failed to seed default data during database initialization")
        raise
    finally:
        session.close()


def _seed_permission_catalog(db: Session) -> list[Permission]:
    """确保权限映射表中的每个权限名称都有对应的权限记录。"""
    existing = {permission.name: permission for permission in db.query(Permission).all()}
    permissions: list[Permission] = []
    for name in all_permission_names():
        permission = existing.get(name)
        if permission is None:
            permission = Permission(name=name)
            db.add(permission)
            logger.info("Seeded permission %s", name)
        permissions.append(permission)
    db.flush()
    return permissions


def _seed_admin_role(db: Session, permissions: list[Permission]) -> Role:
    admin_role = db.query(Role).filter(Role.name == ADMIN_ROLE).first()
    if admin_role is None:
        admin_role = Role(name=ADMIN_ROLE, description=ADMIN_ROLE_DESCRIPTION)
        db.add(admin_role)
        db.flush()

    # 管理员角色始终持有全部已登记权限
    held = {permission.id for permission in admin_role.permissions}
    for permission in permissions:
        if permission.id not in held:
            admin_role.permissions.append(permission)
    db.add(admin_role)
    return admin_role


def _seed_admin_user(db: Session, admin_role: Role) -> None:
    settings = get_settings()
    email = settings.default_admin_email.strip().lower()
    admin_user = db.query(User).filter(User.email == email).first()
    if admin_user is None:
        admin_user = User(
            user_name=DEFAULT_ADMIN_USERNAME,
            email=email,
            hashed_password=get_password_hash(settings.default_admin_password),
            role_id=admin_role.id,
            moderation_status=int(ModerationStatusEnum.APPROVED),
        )
        db.add(admin_user)
        db.flush()
        logger.info("Seeded default administrator %s", email)
    elif admin_user.role_id is None:
        admin_user.role_id = admin_role.id
        db.add(admin_user)
