from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel
from storefront.domain.entities import Principal


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: str) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_principal(self, user_id: str) -> Optional[Principal]:
        """The caller as seen by the services: id and role, nothing else."""
        user = self.get_user(user_id)
        if not user:
            return None
        return Principal(user_id=user.id, role=user.role)

    def count_users(self) -> int:
        return self.db.execute(select(func.count(UserModel.id))).scalar_one()

    def commit(self) -> None:
        self.db.commit()
