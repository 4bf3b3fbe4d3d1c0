"""
Service for linking and unlinking parents and children

Sequences the store lookups, runs the RelationshipValidator and writes the
edge. Every write runs as one unit of work: creating a new person and its
edge either commits both rows or neither.
"""

from sqlalchemy.exc import IntegrityError

from family_tree.database.models import Person, Relationship
from family_tree.repositories.person_repository import PersonRepository
from family_tree.repositories.relationship_repository import RelationshipRepository
from family_tree.services.base_service import BaseService
from family_tree.services.exceptions import (
    DuplicateRelationshipError,
    PersonNotFoundError,
    RelationshipNotFoundError,
    ServiceError,
    handle_service_exceptions,
)
from family_tree.services.person_service import PersonService
from family_tree.services.relationship_validator import MAX_PARENTS, RelationshipValidator
from family_tree.shared.logging_config import get_project_logger


logger = get_project_logger(__name__)


class RelationshipService(BaseService):
    """Parent/child edge management"""

    def __init__(self, db_session=None, person_service: PersonService | None = None,
                 validator: RelationshipValidator | None = None):
        super().__init__(db_session)
        self.person_repository = PersonRepository(self.db_session)
        self.relationship_repository = RelationshipRepository(self.db_session)
        self.person_service = person_service or PersonService(self.db_session)
        self.validator = validator or RelationshipValidator()

    @handle_service_exceptions(logger)
    def link_existing_child(self, parent_id, child_id, relationship_type: str) -> Relationship:
        """Link an existing person as child of the parent; returns the new edge"""
        return self._create_edge(parent_id, child_id, relationship_type)

    @handle_service_exceptions(logger)
    def link_existing_parent(self, child_id, parent_id, relationship_type: str) -> Relationship:
        """Link an existing person as parent of the child; returns the new edge"""
        return self._create_edge(parent_id, child_id, relationship_type)

    @handle_service_exceptions(logger)
    def create_child_and_link(self, parent_id, child_attrs: dict, relationship_type: str) -> Relationship:
        """Create a new person in the parent's tree and link it as child"""
        parent = self._load_person(parent_id, "Parent")
        child = self.person_service.build_person(child_attrs, parent.tree_id)

        self._validate(parent, child, relationship_type, existing_parents=[], edge_exists=False)

        with self.unit_of_work("create child and link"):
            self.person_repository.add(child)
            relationship = self.relationship_repository.create_edge(parent, child, relationship_type)

        logger.info(f"Created child {child.id} and linked it to parent {parent.id}")
        return relationship

    @handle_service_exceptions(logger)
    def create_parent_and_link(self, child_id, parent_attrs: dict, relationship_type: str) -> Relationship:
        """Create a new person in the child's tree and link it as parent"""
        child = self._load_person(child_id, "Child")
        parent = self.person_service.build_person(parent_attrs, child.tree_id)
        existing_parents = self.person_repository.get_parents(child.id)

        # Slot and sex checks run before the parent row exists
        self._validate(parent, child, relationship_type, existing_parents=existing_parents, edge_exists=False)

        with self.unit_of_work("create parent and link"):
            self.person_repository.add(parent)
            relationship = self.relationship_repository.create_edge(parent, child, relationship_type)

        logger.info(f"Created parent {parent.id} and linked it to child {child.id}")
        return relationship

    @handle_service_exceptions(logger)
    def unlink(self, parent_id, child_id) -> None:
        """Remove the parent -> child edge"""
        with self.unit_of_work("unlink"):
            deleted = self.relationship_repository.delete_by_pair(parent_id, child_id)
            if not deleted:
                raise RelationshipNotFoundError(f"Relationship not found: {parent_id} -> {child_id}")

        logger.info(f"Removed relationship {parent_id} -> {child_id}")

    @handle_service_exceptions(logger)
    def available_children(self, parent_id) -> list[Person]:
        """Persons that could be linked as children of the parent, oldest first"""
        parent = self._load_person(parent_id, "Parent")
        return self.person_repository.find_child_candidates(parent)

    @handle_service_exceptions(logger)
    def available_parents(self, child_id) -> list[Person]:
        """Persons that could be linked as parents of the child, youngest first"""
        child = self._load_person(child_id, "Child")
        existing_parents = self.person_repository.get_parents(child.id)

        if len(existing_parents) >= MAX_PARENTS:
            return []

        exclude_is_male = existing_parents[0].is_male if existing_parents else None
        return self.person_repository.find_parent_candidates(child, exclude_is_male=exclude_is_male)

    def _create_edge(self, parent_id, child_id, relationship_type: str) -> Relationship:
        parent = self._load_person(parent_id, "Parent")
        child = self._load_person(child_id, "Child")
        existing_parents = self.person_repository.get_parents(child.id)
        edge_exists = self.relationship_repository.exists(parent.id, child.id)

        self._validate(parent, child, relationship_type, existing_parents, edge_exists)

        parent_key, child_key = parent.id, child.id
        try:
            with self.unit_of_work("create relationship"):
                relationship = self.relationship_repository.create_edge(parent, child, relationship_type)
        except IntegrityError as e:
            # A concurrent writer inserted the same pair after the duplicate check
            if self.relationship_repository.get_by_pair(parent_key, child_key) is not None:
                logger.warning(f"Rejected relationship {parent_key} -> {child_key}: relationship already exists")
                raise DuplicateRelationshipError("relationship already exists") from e
            raise

        logger.info(f"Linked {parent_key} -> {child_key} ({relationship_type})")
        return relationship

    def _validate(self, parent, child, relationship_type, existing_parents, edge_exists) -> None:
        try:
            self.validator.validate(parent, child, relationship_type, existing_parents, edge_exists)
        except ServiceError as e:
            logger.warning(f"Rejected relationship {parent.id} -> {child.id}: {e}")
            raise

    def _load_person(self, person_id, role: str) -> Person:
        person = self.person_repository.get_by_id(person_id)
        if person is None:
            raise PersonNotFoundError(f"{role} person not found: {person_id}")
        return person
