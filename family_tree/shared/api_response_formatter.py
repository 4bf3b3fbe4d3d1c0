"""
API response formatting utilities for consistent API responses across blueprints
"""

from typing import Any

from flask import jsonify

from family_tree.shared.date_utils import LifeDateParser


class APIResponseFormatter:
    """Utility class for formatting consistent API responses"""

    @staticmethod
    def success(data: Any = None, message: str = "", status_code: int = 200) -> tuple:
        """Format a successful API response"""
        response = {
            'success': True,
            'message': message
        }

        if data is not None:
            if isinstance(data, dict):
                response.update(data)
            else:
                response['data'] = data

        return jsonify(response), status_code

    @staticmethod
    def error(error_message: str, status_code: int = 400, error_type: str | None = None,
              details: dict | None = None) -> tuple:
        """Format an error API response"""
        response = {
            'success': False,
            'error': error_message
        }

        if error_type:
            response['error_type'] = error_type
        if details:
            response['details'] = details

        return jsonify(response), status_code

    @staticmethod
    def list_response(key: str, items: list, item_formatter: callable = None, status_code: int = 200) -> tuple:
        """Format a list of entities together with its total"""
        formatted_items = items
        if item_formatter:
            formatted_items = [item_formatter(item) for item in items]

        return APIResponseFormatter.success({
            key: formatted_items,
            'total': len(formatted_items)
        }, status_code=status_code)

    @staticmethod
    def format_user(user) -> dict:
        return {
            'id': str(user.id),
            'email': user.email,
            'created_at': user.created_at.isoformat() if user.created_at else None
        }

    @staticmethod
    def format_tree(tree) -> dict:
        return {
            'id': str(tree.id),
            'owner_id': str(tree.owner_id),
            'name': tree.name,
            'created_at': tree.created_at.isoformat() if tree.created_at else None,
            'updated_at': tree.updated_at.isoformat() if tree.updated_at else None
        }

    @staticmethod
    def format_person(person) -> dict:
        """Full person representation"""
        return {
            'id': str(person.id),
            'first_name': person.first_name,
            'last_name': person.last_name,
            'birth_date': LifeDateParser.format(person.birth_date),
            'death_date': LifeDateParser.format(person.death_date),
            'is_male': person.is_male,
            'biography': person.biography or '',
            'tree_id': str(person.tree_id),
            'created_at': person.created_at.isoformat() if person.created_at else None,
            'updated_at': person.updated_at.isoformat() if person.updated_at else None
        }

    @staticmethod
    def format_person_brief(person) -> dict:
        """Short person representation used by candidate lists"""
        return {
            'id': str(person.id),
            'first_name': person.first_name,
            'last_name': person.last_name,
            'birth_date': LifeDateParser.format(person.birth_date),
            'is_male': person.is_male
        }

    @staticmethod
    def format_relationship(relationship) -> dict:
        return {
            'id': str(relationship.id),
            'parent_id': str(relationship.parent_id),
            'child_id': str(relationship.child_id),
            'relationship_type': relationship.relationship_type
        }
