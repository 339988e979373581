"""API v1 汇总路由：统一挂载所有子路由。"""

from fastapi import APIRouter

from phone_api.packages.inventory.api.v1.endpoints import brands, permissions, phones, roles, users

api_router = APIRouter()
api_router.include_router(users.router)
api_router.include_router(roles.router)
api_router.include_router(permissions.router)
api_router.include_router(brands.router)
api_router.include_router(phones.router)
