"""profiles and analyses

Revision ID: 0001_profiles_and_analyses
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_profiles_and_analyses'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'profiles',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.String(256), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        # One profile per identity.
        sa.UniqueConstraint('user_id', name='uq_profiles_user_id'),
    )
    op.create_table(
        'analyses',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.String(256), nullable=False),
        sa.Column('title', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(32), nullable=False, server_default='draft'),
        sa.Column('data', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_analyses_user_id', 'analyses', ['user_id'])
    op.create_index('ix_analyses_user_created', 'analyses', ['user_id', 'created_at'])


def downgrade():
    op.drop_index('ix_analyses_user_created', table_name='analyses')
    op.drop_index('ix_analyses_user_id', table_name='analyses')
    op.drop_table('analyses')
    op.drop_table('profiles')
