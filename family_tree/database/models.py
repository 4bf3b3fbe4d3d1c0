"""
SQLAlchemy models for users, family trees, persons and parent/child relationships
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy.dialects.postgresql import UUID as POSTGRESQL_UUID
from sqlalchemy.types import CHAR, TypeDecorator

from . import db


RELATIONSHIP_TYPES = ('biological', 'not_biological')
MAX_NAME_LENGTH = 255


def _utcnow():
    return datetime.now(UTC)


class UUID(TypeDecorator):
    """Platform-independent UUID type.

    Uses PostgreSQL's UUID type when available, otherwise uses CHAR(36)
    to store the UUID string.
    """
    impl = CHAR
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(POSTGRESQL_UUID())
        else:
            return dialect.type_descriptor(CHAR(36))

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        elif dialect.name == 'postgresql':
            return str(value)
        else:
            if not isinstance(value, uuid.UUID):
                return str(uuid.UUID(value))
            return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        else:
            if not isinstance(value, uuid.UUID):
                return uuid.UUID(value)
            return value


class User(db.Model):
    """Account owning family trees"""
    __tablename__ = 'users'

    id = db.Column(UUID(), primary_key=True, default=uuid.uuid4)
    email = db.Column(db.String(255), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=_utcnow)

    trees = db.relationship('Tree', back_populates='owner', cascade='all')

    def __repr__(self):
        return f'<User {self.email}>'


class Tree(db.Model):
    """A family tree: the namespace that scopes persons and their relationships"""
    __tablename__ = 'trees'

    id = db.Column(UUID(), primary_key=True, default=uuid.uuid4)
    owner_id = db.Column(UUID(), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    name = db.Column(db.String(MAX_NAME_LENGTH), nullable=False)
    created_at = db.Column(db.DateTime, default=_utcnow)
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow)

    owner = db.relationship('User', back_populates='trees')
    persons = db.relationship('Person', back_populates='tree', cascade='all')

    __table_args__ = (
        db.Index('idx_trees_owner', 'owner_id'),
    )

    def __repr__(self):
        return f'<Tree {self.name}>'


class Person(db.Model):
    """Model for individuals in a family tree"""
    __tablename__ = 'persons'

    id = db.Column(UUID(), primary_key=True, default=uuid.uuid4)
    tree_id = db.Column(UUID(), db.ForeignKey('trees.id', ondelete='CASCADE'), nullable=False)

    first_name = db.Column(db.String(MAX_NAME_LENGTH), nullable=False)
    last_name = db.Column(db.String(MAX_NAME_LENGTH), nullable=False)
    birth_date = db.Column(db.Date)
    death_date = db.Column(db.Date)
    is_male = db.Column(db.Boolean, nullable=False, default=False)
    biography = db.Column(db.Text)

    created_at = db.Column(db.DateTime, default=_utcnow)
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow)

    tree = db.relationship('Tree', back_populates='persons')

    # Incident edges go with the person
    child_links = db.relationship('Relationship',
                                  foreign_keys='Relationship.parent_id',
                                  back_populates='parent',
                                  cascade='all')
    parent_links = db.relationship('Relationship',
                                   foreign_keys='Relationship.child_id',
                                   back_populates='child',
                                   cascade='all')

    __table_args__ = (
        db.Index('idx_persons_tree', 'tree_id'),
        db.Index('idx_persons_tree_birth', 'tree_id', 'birth_date'),
    )

    @property
    def full_name(self):
        return " ".join(filter(None, [self.first_name, self.last_name]))

    def __repr__(self):
        return f'<Person {self.full_name}>'


class Relationship(db.Model):
    """Directed parent -> child edge"""
    __tablename__ = 'relationships'

    id = db.Column(UUID(), primary_key=True, default=uuid.uuid4)
    parent_id = db.Column(UUID(), db.ForeignKey('persons.id', ondelete='CASCADE'), nullable=False)
    child_id = db.Column(UUID(), db.ForeignKey('persons.id', ondelete='CASCADE'), nullable=False)
    relationship_type = db.Column(db.String(20), nullable=False, default='biological')
    created_at = db.Column(db.DateTime, default=_utcnow)

    parent = db.relationship('Person', foreign_keys=[parent_id], back_populates='child_links')
    child = db.relationship('Person', foreign_keys=[child_id], back_populates='parent_links')

    __table_args__ = (
        db.UniqueConstraint('parent_id', 'child_id', name='unique_parent_child'),
        db.CheckConstraint('parent_id <> child_id', name='no_self_relationship'),
        db.CheckConstraint(
            "relationship_type IN ('biological', 'not_biological')",
            name='valid_relationship_type'
        ),
        db.Index('idx_relationships_parent', 'parent_id'),
        db.Index('idx_relationships_child', 'child_id'),
    )

    def __repr__(self):
        return f'<Relationship {self.parent_id} -> {self.child_id} ({self.relationship_type})>'
