"""
Person API blueprint, nested under trees
"""

from flask import Blueprint

from family_tree.blueprints.blueprint_utils import (
    get_json_body,
    get_services,
    login_required,
    owned_tree,
    parse_id,
)
from family_tree.services.exceptions import PersonNotFoundError
from family_tree.shared.api_response_formatter import APIResponseFormatter


api_persons = Blueprint('api_persons', __name__, url_prefix='/api/trees/<tree_id>/persons')


def _person_in_tree(tree_id, person_id):
    """Person of the caller's tree; persons of other trees are reported as not found"""
    tree = owned_tree(tree_id)
    person = get_services().person_service.get_person(parse_id(person_id, 'person id'))
    if person.tree_id != tree.id:
        raise PersonNotFoundError(f"Person not found: {person_id}")
    return person


@api_persons.route('', methods=['GET'])
@login_required
def list_persons(tree_id):
    tree = owned_tree(tree_id)
    persons = get_services().person_service.list_persons(tree.id)
    return APIResponseFormatter.list_response('persons', persons, APIResponseFormatter.format_person)


@api_persons.route('', methods=['POST'])
@login_required
def create_person(tree_id):
    data = get_json_body()
    tree = owned_tree(tree_id)
    person = get_services().person_service.create_person(tree.id, data)
    return APIResponseFormatter.success(
        {'person': APIResponseFormatter.format_person(person)},
        message='Person created',
        status_code=201
    )


@api_persons.route('/<person_id>', methods=['GET'])
@login_required
def get_person(tree_id, person_id):
    person = _person_in_tree(tree_id, person_id)
    return APIResponseFormatter.success({'person': APIResponseFormatter.format_person(person)})


@api_persons.route('/<person_id>', methods=['PUT'])
@login_required
def update_person(tree_id, person_id):
    """Partial update: omitted fields keep their current value"""
    data = get_json_body()
    person = _person_in_tree(tree_id, person_id)
    person = get_services().person_service.update_person(person.id, data)
    return APIResponseFormatter.success(
        {'person': APIResponseFormatter.format_person(person)},
        message='Person updated'
    )


@api_persons.route('/<person_id>', methods=['DELETE'])
@login_required
def delete_person(tree_id, person_id):
    person = _person_in_tree(tree_id, person_id)
    get_services().person_service.delete_person(person.id)
    return APIResponseFormatter.success(message='Person deleted')
