"""
Tests for tree CRUD
"""

import uuid
from datetime import date

import pytest

from family_tree.database.models import Person, Relationship
from family_tree.services.exceptions import TreeNotFoundError, ValidationError


class TestTreeService:
    """Test tree creation, lookup and deletion"""

    def test_create_tree(self, services, user):
        tree = services.tree_service.create_tree(user.id, '  Lovelace family ')

        assert tree.id is not None
        assert tree.owner_id == user.id
        assert tree.name == 'Lovelace family'

    @pytest.mark.parametrize("name", ['', '   ', None, 42, 'x' * 256])
    def test_invalid_name(self, services, user, name):
        with pytest.raises(ValidationError):
            services.tree_service.create_tree(user.id, name)

    def test_list_trees_only_own(self, services, user):
        other = services.auth_service.register('grace@example.com', 'secret123')
        services.tree_service.create_tree(user.id, 'Mine')
        services.tree_service.create_tree(other.id, 'Theirs')

        trees = services.tree_service.list_trees(user.id)

        assert [t.name for t in trees] == ['Mine']

    def test_get_tree_for_owner_hides_other_users_trees(self, services, tree):
        other = services.auth_service.register('grace@example.com', 'secret123')

        assert services.tree_service.get_tree_for_owner(tree.id, tree.owner_id).id == tree.id
        with pytest.raises(TreeNotFoundError):
            services.tree_service.get_tree_for_owner(tree.id, other.id)

    def test_get_missing_tree(self, services, db):
        with pytest.raises(TreeNotFoundError):
            services.tree_service.get_tree(uuid.uuid4())

    def test_update_tree(self, services, tree):
        updated = services.tree_service.update_tree(tree.id, 'Byron family')
        assert updated.name == 'Byron family'

    def test_delete_tree_cascades(self, db, services, tree, family):
        services.relationship_service.link_existing_child(family['father'].id, family['child'].id, 'biological')

        services.tree_service.delete_tree(tree.id)

        assert db.session.query(Person).count() == 0
        assert db.session.query(Relationship).count() == 0
        with pytest.raises(TreeNotFoundError):
            services.tree_service.get_tree(tree.id)

    def test_delete_tree_keeps_other_trees(self, db, services, user, tree, make_person):
        other_tree = services.tree_service.create_tree(user.id, 'Other family')
        make_person('Kept', date(1900, 1, 1), tree_id=other_tree.id)

        services.tree_service.delete_tree(tree.id)

        assert db.session.query(Person).count() == 1
