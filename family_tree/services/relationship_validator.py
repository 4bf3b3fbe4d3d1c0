"""
Decision logic for parent -> child edges

Pure functions over person records: no session, no queries. Callers load the
endpoints and the child's current parents and hand them in.
"""

from collections.abc import Sequence

from family_tree.database.models import RELATIONSHIP_TYPES
from family_tree.services.exceptions import (
    ChronologyError,
    CrossTreeError,
    DuplicateRelationshipError,
    GenderConflictError,
    TooManyParentsError,
    ValidationError,
)


MAX_PARENTS = 2


class RelationshipValidator:
    """
    Runs the edge checks in a fixed order and raises on the first failure:

    1. relationship type (and no self-link)
    2. same tree
    3. chronology
    4. parent slots (count and sex)
    5. duplicate edge
    """

    def validate(self, parent, child, relationship_type: str,
                 existing_parents: Sequence = (), edge_exists: bool = False) -> None:
        """
        Args:
            parent: Proposed parent (persisted or not)
            child: Proposed child (persisted or not)
            relationship_type: 'biological' or 'not_biological'
            existing_parents: Persons already linked as the child's parents
            edge_exists: Whether parent -> child is already stored
        """
        self.check_relationship_type(relationship_type)
        self.check_not_self(parent, child)
        self.check_same_tree(parent, child)
        self.check_chronology(parent, child)
        self.check_parent_slots(parent, existing_parents)
        self.check_not_duplicate(edge_exists)

    @staticmethod
    def check_relationship_type(relationship_type: str) -> None:
        if relationship_type not in RELATIONSHIP_TYPES:
            raise ValidationError("relationship type must be 'biological' or 'not_biological'")

    @staticmethod
    def check_not_self(parent, child) -> None:
        if parent.id is not None and parent.id == child.id:
            raise ValidationError("a person cannot be their own parent")

    @staticmethod
    def check_same_tree(parent, child) -> None:
        if parent.tree_id != child.tree_id:
            raise CrossTreeError("parent and child must be in the same tree")

    @staticmethod
    def check_chronology(parent, child) -> None:
        # Unknown dates are permissive
        if parent.birth_date is None or child.birth_date is None:
            return
        if not parent.birth_date < child.birth_date:
            raise ChronologyError("parent must be born before child")

    @staticmethod
    def check_parent_slots(parent, existing_parents: Sequence) -> None:
        # The proposed parent itself is left to the duplicate check
        others = [p for p in existing_parents if parent.id is None or p.id != parent.id]

        if len(others) >= MAX_PARENTS:
            raise TooManyParentsError(f"child already has {MAX_PARENTS} parents")
        if len(others) == 1 and bool(others[0].is_male) == bool(parent.is_male):
            raise GenderConflictError("parents must be of different gender")

    @staticmethod
    def check_not_duplicate(edge_exists: bool) -> None:
        if edge_exists:
            raise DuplicateRelationshipError("relationship already exists")
