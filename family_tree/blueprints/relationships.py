"""
Relationship API blueprint: linking, unlinking and candidate lookup
"""

from flask import Blueprint

from family_tree.blueprints.blueprint_utils import (
    get_json_body,
    get_services,
    login_required,
    owned_person,
    relationship_type_from,
)
from family_tree.shared.api_response_formatter import APIResponseFormatter


api_relationships = Blueprint('api_relationships', __name__, url_prefix='/api/persons')


def _created(relationship):
    return APIResponseFormatter.success(
        {'relationship': APIResponseFormatter.format_relationship(relationship)},
        message='Relationship created',
        status_code=201
    )


@api_relationships.route('/<person_id>/children', methods=['POST'])
@login_required
def add_child(person_id):
    """Link an existing person as child"""
    data = get_json_body()
    parent = owned_person(person_id)
    child = owned_person(data.get('child_id'), 'child_id')

    relationship = get_services().relationship_service.link_existing_child(
        parent.id, child.id, relationship_type_from(data)
    )
    return _created(relationship)


@api_relationships.route('/<person_id>/parents', methods=['POST'])
@login_required
def add_parent(person_id):
    """Link an existing person as parent"""
    data = get_json_body()
    child = owned_person(person_id)
    parent = owned_person(data.get('parent_id'), 'parent_id')

    relationship = get_services().relationship_service.link_existing_parent(
        child.id, parent.id, relationship_type_from(data)
    )
    return _created(relationship)


@api_relationships.route('/<person_id>/children/new', methods=['POST'])
@login_required
def create_child_and_link(person_id):
    """Create a new person and link it as child"""
    data = get_json_body()
    parent = owned_person(person_id)

    relationship = get_services().relationship_service.create_child_and_link(
        parent.id, data, relationship_type_from(data)
    )
    return _created(relationship)


@api_relationships.route('/<person_id>/parents/new', methods=['POST'])
@login_required
def create_parent_and_link(person_id):
    """Create a new person and link it as parent"""
    data = get_json_body()
    child = owned_person(person_id)

    relationship = get_services().relationship_service.create_parent_and_link(
        child.id, data, relationship_type_from(data)
    )
    return _created(relationship)


@api_relationships.route('/<person_id>/children/<child_id>', methods=['DELETE'])
@login_required
def remove_child(person_id, child_id):
    parent = owned_person(person_id)
    child = owned_person(child_id)
    get_services().relationship_service.unlink(parent.id, child.id)
    return APIResponseFormatter.success(message='Relationship deleted')


@api_relationships.route('/<person_id>/parents/<parent_id>', methods=['DELETE'])
@login_required
def remove_parent(person_id, parent_id):
    child = owned_person(person_id)
    parent = owned_person(parent_id)
    get_services().relationship_service.unlink(parent.id, child.id)
    return APIResponseFormatter.success(message='Relationship deleted')


@api_relationships.route('/<person_id>/available-children', methods=['GET'])
@login_required
def available_children(person_id):
    """Persons that may be linked as children, oldest first"""
    parent = owned_person(person_id)
    candidates = get_services().relationship_service.available_children(parent.id)
    return APIResponseFormatter.list_response('persons', candidates, APIResponseFormatter.format_person_brief)


@api_relationships.route('/<person_id>/available-parents', methods=['GET'])
@login_required
def available_parents(person_id):
    """Persons that may be linked as parents, youngest first"""
    child = owned_person(person_id)
    candidates = get_services().relationship_service.available_parents(child.id)
    return APIResponseFormatter.list_response('persons', candidates, APIResponseFormatter.format_person_brief)
