"""
Repository for family trees
"""

from sqlalchemy import select

from family_tree.database.models import Tree
from family_tree.repositories.base_repository import ModelRepository, as_uuid


class TreeRepository(ModelRepository[Tree]):
    """Tree store"""

    def __init__(self, db_session=None):
        super().__init__(Tree, db_session)

    def list_by_owner(self, owner_id) -> list[Tree]:
        """Trees of one user, newest first"""
        def _list_by_owner():
            stmt = (
                select(Tree)
                .where(Tree.owner_id == as_uuid(owner_id))
                .order_by(Tree.created_at.desc())
            )
            return self.db_session.execute(stmt).scalars().all()

        return self.safe_query(_list_by_owner, f"list trees of owner {owner_id}")
