"""权限目录服务。"""

from sqlalchemy.orm import Session

from phone_api.packages.inventory.core.responses import create_response
from phone_api.packages.inventory.crud.permissions import permission_crud


class PermissionService:
    def list_permissions(self, db: Session) -> dict:
        items = [{"id": item.id, "name": item.name} for item in permission_crud.get_all(db)]
        return create_response("Permissions retrieved successfully.", items)


permission_service = PermissionService()
