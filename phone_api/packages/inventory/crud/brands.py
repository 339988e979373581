"""品牌 CRUD。"""

from typing import List

from sqlalchemy.orm import Session

from phone_api.packages.inventory.crud.base import CRUDBase
from phone_api.packages.inventory.models.brand import Brand


class CRUDBrand(CRUDBase[Brand]):
    def get_all(self, db: Session) -> List[Brand]:
        return self.query(db).order_by(self.model.name.asc()).all()


brand_crud = CRUDBrand(Brand)
