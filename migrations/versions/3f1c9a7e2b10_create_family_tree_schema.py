"""Create users, trees, persons and relationships tables

Revision ID: 3f1c9a7e2b10
Revises:
Create Date: 2026-10-17 09:12:31.504211

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = '3f1c9a7e2b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email')
    )

    op.create_table(
        'trees',
        sa.Column('id', postgresql.UUID(), nullable=False),
        sa.Column('owner_id', postgresql.UUID(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_trees_owner', 'trees', ['owner_id'])

    op.create_table(
        'persons',
        sa.Column('id', postgresql.UUID(), nullable=False),
        sa.Column('tree_id', postgresql.UUID(), nullable=False),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('death_date', sa.Date(), nullable=True),
        sa.Column('is_male', sa.Boolean(), nullable=False),
        sa.Column('biography', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['tree_id'], ['trees.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_persons_tree', 'persons', ['tree_id'])
    op.create_index('idx_persons_tree_birth', 'persons', ['tree_id', 'birth_date'])

    op.create_table(
        'relationships',
        sa.Column('id', postgresql.UUID(), nullable=False),
        sa.Column('parent_id', postgresql.UUID(), nullable=False),
        sa.Column('child_id', postgresql.UUID(), nullable=False),
        sa.Column('relationship_type', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['parent_id'], ['persons.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['child_id'], ['persons.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('parent_id', 'child_id', name='unique_parent_child'),
        sa.CheckConstraint('parent_id <> child_id', name='no_self_relationship'),
        sa.CheckConstraint(
            "relationship_type IN ('biological', 'not_biological')",
            name='valid_relationship_type'
        )
    )
    op.create_index('idx_relationships_parent', 'relationships', ['parent_id'])
    op.create_index('idx_relationships_child', 'relationships', ['child_id'])


def downgrade():
    op.drop_index('idx_relationships_child', table_name='relationships')
    op.drop_index('idx_relationships_parent', table_name='relationships')
    op.drop_table('relationships')
    op.drop_index('idx_persons_tree_birth', table_name='persons')
    op.drop_index('idx_persons_tree', table_name='persons')
    op.drop_table('persons')
    op.drop_index('idx_trees_owner', table_name='trees')
    op.drop_table('trees')
    op.drop_table('users')
