"""
Tests for person CRUD and validation
"""

import uuid
from datetime import date, timedelta

import pytest

from family_tree.database.models import Relationship
from family_tree.services.exceptions import (
    ChronologyError,
    PersonNotFoundError,
    TreeNotFoundError,
    ValidationError,
)


class TestCreatePerson:
    """Test person creation"""

    def test_create_person(self, services, tree):
        person = services.person_service.create_person(tree.id, {
            'first_name': '  Ada ',
            'last_name': 'Lovelace',
            'birth_date': '1815-12-10',
            'death_date': '1852-11-27T00:00:00Z',
            'is_male': False,
            'biography': 'Mathematician',
        })

        assert person.id is not None
        assert person.tree_id == tree.id
        assert person.first_name == 'Ada'
        assert person.birth_date == date(1815, 12, 10)
        assert person.death_date == date(1852, 11, 27)
        assert person.biography == 'Mathematician'

    def test_defaults(self, services, tree):
        person = services.person_service.create_person(tree.id, {'first_name': 'A', 'last_name': 'B'})

        assert person.is_male is False
        assert person.birth_date is None
        assert person.biography == ''

    def test_missing_tree(self, services, db):
        with pytest.raises(TreeNotFoundError):
            services.person_service.create_person(uuid.uuid4(), {'first_name': 'A', 'last_name': 'B'})

    @pytest.mark.parametrize("attrs,message", [
        ({'last_name': 'B'}, "first name is required"),
        ({'first_name': '   ', 'last_name': 'B'}, "first name is required"),
        ({'first_name': 'A'}, "last name is required"),
        ({'first_name': 'A' * 256, 'last_name': 'B'}, "too long"),
        ({'first_name': 'A', 'last_name': 'B', 'birth_date': '10/12/1815'}, "Invalid date"),
        ({'first_name': 'A', 'last_name': 'B', 'is_male': 'yes'}, "is_male must be a boolean"),
        ({'first_name': 42, 'last_name': 'B'}, "first_name must be a string"),
    ])
    def test_invalid_attributes(self, services, tree, attrs, message):
        with pytest.raises(ValidationError, match=message):
            services.person_service.create_person(tree.id, attrs)

    def test_birth_in_future(self, services, tree):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()

        with pytest.raises(ChronologyError, match="future"):
            services.person_service.create_person(tree.id, {'first_name': 'A', 'last_name': 'B',
                                                            'birth_date': tomorrow})

    def test_death_before_birth(self, services, tree):
        with pytest.raises(ChronologyError, match="death date"):
            services.person_service.create_person(tree.id, {
                'first_name': 'A', 'last_name': 'B',
                'birth_date': '1900-01-01', 'death_date': '1899-12-31'
            })

    def test_death_without_birth_accepted(self, services, tree):
        person = services.person_service.create_person(tree.id, {'first_name': 'A', 'last_name': 'B',
                                                                  'death_date': '1899-12-31'})
        assert person.death_date == date(1899, 12, 31)


class TestReadUpdateDelete:
    """Test lookups, updates and deletes"""

    def test_get_person(self, services, make_person):
        person = make_person('Ada')
        assert services.person_service.get_person(str(person.id)).id == person.id

    def test_get_missing_person(self, services, db):
        with pytest.raises(PersonNotFoundError):
            services.person_service.get_person(uuid.uuid4())

    def test_list_persons(self, services, tree, make_person):
        make_person('First')
        make_person('Second')

        persons = services.person_service.list_persons(tree.id)
        assert {p.first_name for p in persons} == {'First', 'Second'}

    def test_list_persons_missing_tree(self, services, db):
        with pytest.raises(TreeNotFoundError):
            services.person_service.list_persons(uuid.uuid4())

    def test_partial_update(self, services, tree, make_person):
        person = make_person('Ada', date(1815, 12, 10))

        updated = services.person_service.update_person(person.id, {
            'last_name': 'King',
            'biography': 'Countess of Lovelace',
            'tree_id': str(uuid.uuid4()),
        })

        assert updated.first_name == 'Ada'
        assert updated.last_name == 'King'
        assert updated.birth_date == date(1815, 12, 10)
        assert updated.tree_id == tree.id

    def test_update_clears_date(self, services, make_person):
        person = make_person('Ada', date(1815, 12, 10))
        updated = services.person_service.update_person(person.id, {'birth_date': None})
        assert updated.birth_date is None

    def test_update_validates_merged_values(self, services, make_person):
        person = make_person('Ada', date(1815, 12, 10))

        with pytest.raises(ChronologyError):
            services.person_service.update_person(person.id, {'death_date': '1800-01-01'})

    def test_delete_person_removes_edges(self, db, services, family):
        services.relationship_service.link_existing_child(family['father'].id, family['child'].id, 'biological')
        services.relationship_service.link_existing_child(family['mother'].id, family['child'].id, 'biological')

        services.person_service.delete_person(family['child'].id)

        assert db.session.query(Relationship).count() == 0
        with pytest.raises(PersonNotFoundError):
            services.person_service.get_person(family['child'].id)

    def test_delete_missing_person(self, services, db):
        with pytest.raises(PersonNotFoundError):
            services.person_service.delete_person(uuid.uuid4())
