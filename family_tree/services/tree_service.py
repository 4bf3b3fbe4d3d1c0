"""
Service for family trees owned by a user
"""

from family_tree.database.models import MAX_NAME_LENGTH, Tree
from family_tree.repositories.base_repository import as_uuid
from family_tree.repositories.tree_repository import TreeRepository
from family_tree.services.base_service import BaseService
from family_tree.services.exceptions import TreeNotFoundError, ValidationError, handle_service_exceptions
from family_tree.shared.logging_config import get_project_logger


logger = get_project_logger(__name__)


class TreeService(BaseService):
    """Service for creating, reading, renaming and deleting trees"""

    def __init__(self, db_session=None):
        super().__init__(db_session)
        self.tree_repository = TreeRepository(self.db_session)

    @handle_service_exceptions(logger)
    def create_tree(self, owner_id, name) -> Tree:
        name = self._clean_name(name)
        with self.unit_of_work("create tree"):
            tree = self.tree_repository.create(owner_id=as_uuid(owner_id), name=name)

        logger.info(f"Created tree {tree.id} for user {owner_id}")
        return tree

    @handle_service_exceptions(logger)
    def get_tree(self, tree_id) -> Tree:
        tree = self.tree_repository.get_by_id(tree_id)
        if tree is None:
            raise TreeNotFoundError(f"Tree not found: {tree_id}")
        return tree

    @handle_service_exceptions(logger)
    def get_tree_for_owner(self, tree_id, owner_id) -> Tree:
        """Fetch a tree, hiding trees of other users behind TreeNotFoundError"""
        tree = self.get_tree(tree_id)
        if tree.owner_id != as_uuid(owner_id):
            raise TreeNotFoundError(f"Tree not found: {tree_id}")
        return tree

    @handle_service_exceptions(logger)
    def list_trees(self, owner_id) -> list[Tree]:
        return self.tree_repository.list_by_owner(owner_id)

    @handle_service_exceptions(logger)
    def update_tree(self, tree_id, name) -> Tree:
        tree = self.get_tree(tree_id)
        name = self._clean_name(name)
        with self.unit_of_work("update tree"):
            self.tree_repository.update(tree, name=name)

        logger.info(f"Renamed tree {tree.id}")
        return tree

    @handle_service_exceptions(logger)
    def delete_tree(self, tree_id) -> None:
        """Delete a tree with all of its persons and relationships"""
        tree = self.get_tree(tree_id)
        with self.unit_of_work("delete tree"):
            self.tree_repository.delete(tree)
        logger.info(f"Deleted tree {tree_id}")

    @staticmethod
    def _clean_name(name) -> str:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("tree name is required")
        name = name.strip()
        if len(name) > MAX_NAME_LENGTH:
            raise ValidationError(f"tree name is too long (max {MAX_NAME_LENGTH} characters)")
        return name
