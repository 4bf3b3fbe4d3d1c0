"""
Repository for person records scoped to a tree
"""

from sqlalchemy import func, select

from family_tree.database.models import Person, Relationship
from family_tree.repositories.base_repository import ModelRepository, as_uuid


class PersonRepository(ModelRepository[Person]):
    """Person store: lookups by tree and by incoming/outgoing relationship"""

    def __init__(self, db_session=None):
        super().__init__(Person, db_session)

    def list_by_tree(self, tree_id) -> list[Person]:
        """All persons of a tree, newest first"""
        def _list_by_tree():
            stmt = (
                select(Person)
                .where(Person.tree_id == as_uuid(tree_id))
                .order_by(Person.created_at.desc())
            )
            return self.db_session.execute(stmt).scalars().all()

        return self.safe_query(_list_by_tree, f"list persons of tree {tree_id}")

    def list_by_birth_date(self, tree_id) -> list[Person]:
        """All persons of a tree, oldest first; undated persons come last"""
        def _list_by_birth_date():
            stmt = (
                select(Person)
                .where(Person.tree_id == as_uuid(tree_id))
                .order_by(Person.birth_date.asc().nulls_last(), Person.created_at.asc())
            )
            return self.db_session.execute(stmt).scalars().all()

        return self.safe_query(_list_by_birth_date, f"list persons of tree {tree_id} by birth date")

    def get_parents(self, child_id) -> list[Person]:
        """Persons with an edge pointing at the child"""
        def _get_parents():
            stmt = (
                select(Person)
                .join(Relationship, Relationship.parent_id == Person.id)
                .where(Relationship.child_id == as_uuid(child_id))
                .order_by(Relationship.created_at.asc())
            )
            return self.db_session.execute(stmt).scalars().all()

        return self.safe_query(_get_parents, f"get parents of {child_id}")

    def get_children(self, parent_id) -> list[Person]:
        """Persons the parent has an edge pointing at"""
        def _get_children():
            stmt = (
                select(Person)
                .join(Relationship, Relationship.child_id == Person.id)
                .where(Relationship.parent_id == as_uuid(parent_id))
                .order_by(Person.birth_date.asc().nulls_last())
            )
            return self.db_session.execute(stmt).scalars().all()

        return self.safe_query(_get_children, f"get children of {parent_id}")

    def find_child_candidates(self, parent: Person) -> list[Person]:
        """
        Same-tree persons born strictly after the parent, not yet linked to it
        and with a free parent slot, ordered by ascending birth date.

        A parent without a birth date has no candidates.
        """
        if parent.birth_date is None:
            return []

        def _find_child_candidates():
            already_children = select(Relationship.child_id).where(Relationship.parent_id == parent.id)
            parent_count = (
                select(func.count(Relationship.id))
                .where(Relationship.child_id == Person.id)
                .correlate(Person)
                .scalar_subquery()
            )
            stmt = (
                select(Person)
                .where(
                    Person.tree_id == parent.tree_id,
                    Person.id != parent.id,
                    Person.birth_date > parent.birth_date,
                    Person.id.not_in(already_children),
                    parent_count < 2,
                )
                .order_by(Person.birth_date.asc(), Person.created_at.asc())
            )
            return self.db_session.execute(stmt).scalars().all()

        return self.safe_query(_find_child_candidates, f"find child candidates for {parent.id}")

    def find_parent_candidates(self, child: Person, exclude_is_male: bool | None = None) -> list[Person]:
        """
        Same-tree persons born strictly before the child and not yet its
        parents, ordered by descending birth date.

        Args:
            child: The person looking for a parent
            exclude_is_male: Drop candidates with this sex flag (None keeps both)
        """
        if child.birth_date is None:
            return []

        def _find_parent_candidates():
            already_parents = select(Relationship.parent_id).where(Relationship.child_id == child.id)
            conditions = [
                Person.tree_id == child.tree_id,
                Person.id != child.id,
                Person.birth_date < child.birth_date,
                Person.id.not_in(already_parents),
            ]
            if exclude_is_male is not None:
                conditions.append(Person.is_male != exclude_is_male)

            stmt = (
                select(Person)
                .where(*conditions)
                .order_by(Person.birth_date.desc(), Person.created_at.asc())
            )
            return self.db_session.execute(stmt).scalars().all()

        return self.safe_query(_find_parent_candidates, f"find parent candidates for {child.id}")
