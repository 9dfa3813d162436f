"""Initial schema for the record store

Revision ID: 001_initial
Revises:
Create Date: 2025-01-21 00:00:00.000000

All record kinds share the records table, keyed by (kind, record_id), with
the fields in a JSON payload. record_sequences keeps the last id per kind so
deleted ids are never handed out again.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create records, record_sequences and password_reset_tokens."""
    op.create_table(
        'records',
        sa.Column('kind', sa.String(length=50), nullable=False),
        sa.Column('record_id', sa.Integer(), nullable=False),
        sa.Column('payload', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('kind', 'record_id')
    )
    op.create_index(op.f('ix_records_updated_at'), 'records', ['updated_at'], unique=False)

    op.create_table(
        'record_sequences',
        sa.Column('kind', sa.String(length=50), nullable=False),
        sa.Column('last_id', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('kind')
    )

    op.create_table(
        'password_reset_tokens',
        sa.Column('token', sa.String(length=128), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('token')
    )
    op.create_index(
        op.f('ix_password_reset_tokens_user_id'), 'password_reset_tokens', ['user_id'], unique=False
    )


def downgrade() -> None:
    """Drop the record store tables."""
    op.drop_index(op.f('ix_password_reset_tokens_user_id'), table_name='password_reset_tokens')
    op.drop_table('password_reset_tokens')
    op.drop_table('record_sequences')
    op.drop_index(op.f('ix_records_updated_at'), table_name='records')
    op.drop_table('records')
