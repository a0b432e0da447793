from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel
from storefront.domain.entities import Principal
from storefront.domain.errors import NotFound, ValidationFailed
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

NAME_MIN_LENGTH = 2


class AccountService:
    """
    Profile of the signed-in user. Email and role are managed by the
    identity provider and are read-only here.
    """

    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def get_profile(self, principal: Principal) -> UserModel:
        user = self.repo.get_user(principal.user_id)
        if not user:
            raise NotFound("User not found")
        return user

    def update_profile(self, principal: Principal, name: str, phone: str | None = None) -> UserModel:
        if len(name or "") < NAME_MIN_LENGTH:
            raise ValidationFailed("Name must be at least 2 characters")

        user = self.get_profile(principal)
        user.name = name
        # an empty phone clears it
        user.phone = phone or None
        self.repo.commit()

        logger.info(f"Profile of user {user.id} updated")
        return user
