"""
Repository for parent -> child relationship edges
"""

from sqlalchemy import select

from family_tree.database.models import Person, Relationship
from family_tree.repositories.base_repository import ModelRepository, as_uuid


class RelationshipRepository(ModelRepository[Relationship]):
    """Relationship store"""

    def __init__(self, db_session=None):
        super().__init__(Relationship, db_session)

    def create_edge(self, parent: Person, child: Person, relationship_type: str) -> Relationship:
        """Insert the edge; endpoints may still be pending in the session"""
        def _create_edge():
            relationship = Relationship(
                parent=parent,
                child=child,
                relationship_type=relationship_type
            )
            self.db_session.add(relationship)
            return relationship

        return self.safe_operation(_create_edge, f"create relationship {parent.id} -> {child.id}")

    def get_by_pair(self, parent_id, child_id) -> Relationship | None:
        def _get_by_pair():
            stmt = select(Relationship).where(
                Relationship.parent_id == as_uuid(parent_id),
                Relationship.child_id == as_uuid(child_id)
            )
            return self.db_session.execute(stmt).scalar_one_or_none()

        return self.safe_query(_get_by_pair, f"get relationship {parent_id} -> {child_id}")

    def exists(self, parent_id, child_id) -> bool:
        return self.get_by_pair(parent_id, child_id) is not None

    def delete_by_pair(self, parent_id, child_id) -> bool:
        """Delete the edge; False when there was nothing to delete"""
        relationship = self.get_by_pair(parent_id, child_id)
        if relationship is None:
            return False

        self.delete(relationship)
        return True

    def list_by_tree(self, tree_id) -> list[Relationship]:
        """Edges whose parent belongs to the tree"""
        def _list_by_tree():
            stmt = (
                select(Relationship)
                .join(Person, Relationship.parent_id == Person.id)
                .where(Person.tree_id == as_uuid(tree_id))
                .order_by(Relationship.created_at.asc())
            )
            return self.db_session.execute(stmt).scalars().all()

        return self.safe_query(_list_by_tree, f"list relationships of tree {tree_id}")
