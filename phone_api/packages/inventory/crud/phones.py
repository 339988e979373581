"""手机 CRUD：支持按型号关键字分页查询。"""

from typing import Optional, Tuple

from sqlalchemy.orm import Session

from phone_api.packages.inventory.crud.base import CRUDBase
from phone_api.packages.inventory.models.phone import Phone


class CRUDPhone(CRUDBase[Phone]):
    def list_paged(
        self,
        db: Session,
        *,
        keyword: Optional[str] = None,
        skip: int = 0,
        limit: int = 10,
    ) -> Tuple[list[Phone], int]:
        """按型号模糊匹配并按创建时间倒序返回分页结果。"""
        query = self.query(db)
        if keyword and keyword.strip():
            query = query.filter(self.model.model.ilike(f"%{keyword.strip()}%"))
        query = query.order_by(self.model.created.desc(), self.model.model.asc())
        return self.paginate(query, skip=skip, limit=limit)

    def count_by_brand(self, db: Session, brand_id) -> int:
        return self.query(db).filter(self.model.brand_id == brand_id).count()


phone_crud = CRUDPhone(Phone)
