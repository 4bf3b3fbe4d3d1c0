"""
Repository layer for data access
"""

from .person_repository import PersonRepository
from .relationship_repository import RelationshipRepository
from .tree_repository import TreeRepository
from .user_repository import UserRepository


__all__ = [
    'PersonRepository',
    'RelationshipRepository',
    'TreeRepository',
    'UserRepository'
]
