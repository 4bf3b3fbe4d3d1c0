"""
Service for person records: validated create/read/update/delete
"""

from datetime import date

from family_tree.database.models import MAX_NAME_LENGTH, Person
from family_tree.repositories.person_repository import PersonRepository
from family_tree.repositories.tree_repository import TreeRepository
from family_tree.services.base_service import BaseService
from family_tree.services.exceptions import (
    ChronologyError,
    PersonNotFoundError,
    TreeNotFoundError,
    ValidationError,
    handle_service_exceptions,
)
from family_tree.shared.date_utils import LifeDateParser
from family_tree.shared.logging_config import get_project_logger


logger = get_project_logger(__name__)

EDITABLE_FIELDS = ('first_name', 'last_name', 'birth_date', 'death_date', 'is_male', 'biography')


class PersonService(BaseService):
    """Service for managing persons inside a tree"""

    def __init__(self, db_session=None):
        super().__init__(db_session)
        self.person_repository = PersonRepository(self.db_session)
        self.tree_repository = TreeRepository(self.db_session)

    def build_person(self, attrs: dict, tree_id) -> Person:
        """
        Validate person attributes and return an unsaved Person

        Raises:
            ValidationError: missing/oversized names, malformed values
            ChronologyError: birth in the future, death before birth
        """
        values = self._clean_attrs(attrs)
        self._validate(values)
        return Person(tree_id=tree_id, **values)

    @handle_service_exceptions(logger)
    def create_person(self, tree_id, attrs: dict) -> Person:
        """Create a person in an existing tree"""
        tree = self.tree_repository.get_by_id(tree_id)
        if tree is None:
            raise TreeNotFoundError(f"Tree not found: {tree_id}")

        person = self.build_person(attrs, tree.id)
        with self.unit_of_work("create person"):
            self.person_repository.add(person)

        logger.info(f"Created person {person.id} in tree {tree.id}")
        return person

    @handle_service_exceptions(logger)
    def get_person(self, person_id) -> Person:
        person = self.person_repository.get_by_id(person_id)
        if person is None:
            raise PersonNotFoundError(f"Person not found: {person_id}")
        return person

    @handle_service_exceptions(logger)
    def list_persons(self, tree_id) -> list[Person]:
        """All persons of a tree, newest first"""
        if self.tree_repository.get_by_id(tree_id) is None:
            raise TreeNotFoundError(f"Tree not found: {tree_id}")
        return self.person_repository.list_by_tree(tree_id)

    @handle_service_exceptions(logger)
    def update_person(self, person_id, attrs: dict) -> Person:
        """Update names, dates, sex and biography; the owning tree never changes"""
        person = self.get_person(person_id)

        current = {field: getattr(person, field) for field in EDITABLE_FIELDS}
        current.update({key: value for key, value in attrs.items() if key in EDITABLE_FIELDS})
        values = self._clean_attrs(current)
        self._validate(values)

        with self.unit_of_work("update person"):
            self.person_repository.update(person, **values)

        logger.info(f"Updated person {person.id}")
        return person

    @handle_service_exceptions(logger)
    def delete_person(self, person_id) -> None:
        """Delete a person together with every relationship touching it"""
        person = self.get_person(person_id)
        with self.unit_of_work("delete person"):
            self.person_repository.delete(person)
        logger.info(f"Deleted person {person_id}")

    def _clean_attrs(self, attrs: dict) -> dict:
        try:
            birth_date = LifeDateParser.parse(attrs.get('birth_date'))
            death_date = LifeDateParser.parse(attrs.get('death_date'))
        except ValueError as e:
            raise ValidationError(f"Invalid date: {e}") from e

        is_male = attrs.get('is_male', False)
        if is_male is None:
            is_male = False
        if not isinstance(is_male, bool):
            raise ValidationError("is_male must be a boolean")

        return {
            'first_name': self._text(attrs, 'first_name').strip(),
            'last_name': self._text(attrs, 'last_name').strip(),
            'birth_date': birth_date,
            'death_date': death_date,
            'is_male': is_male,
            'biography': self._text(attrs, 'biography'),
        }

    @staticmethod
    def _text(attrs: dict, key: str) -> str:
        value = attrs.get(key) or ''
        if not isinstance(value, str):
            raise ValidationError(f"{key} must be a string")
        return value

    def _validate(self, values: dict) -> None:
        if not values['first_name']:
            raise ValidationError("first name is required")
        if not values['last_name']:
            raise ValidationError("last name is required")
        if len(values['first_name']) > MAX_NAME_LENGTH or len(values['last_name']) > MAX_NAME_LENGTH:
            raise ValidationError(f"name is too long (max {MAX_NAME_LENGTH} characters)")

        birth_date = values['birth_date']
        death_date = values['death_date']
        if birth_date and birth_date > date.today():
            raise ChronologyError("birth date cannot be in the future")
        if birth_date and death_date and death_date < birth_date:
            raise ChronologyError("death date cannot be before birth date")
