"""
Repository for user accounts
"""

from sqlalchemy import select

from family_tree.database.models import User
from family_tree.repositories.base_repository import ModelRepository


class UserRepository(ModelRepository[User]):

    def __init__(self, db_session=None):
        super().__init__(User, db_session)

    def get_by_email(self, email: str) -> User | None:
        def _get_by_email():
            stmt = select(User).filter_by(email=email)
            return self.db_session.execute(stmt).scalar_one_or_none()

        return self.safe_query(_get_by_email, "get user by email")
