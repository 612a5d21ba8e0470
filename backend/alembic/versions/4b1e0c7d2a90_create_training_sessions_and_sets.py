"""create training_sessions + exercise_sets

Revision ID: 4b1e0c7d2a90
Revises:
Create Date: 2026-01-03 09:12:40.114205

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e0c7d2a90'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) one row per logged day; (date, day_key) is upserted by the app
    op.create_table(
        'training_sessions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('uid', sa.String(length=64), nullable=False, unique=True),
        sa.Column('seq', sa.Integer(), nullable=True),
        sa.Column('date', sa.String(length=10), nullable=False),
        sa.Column('day_key', sa.String(length=32), nullable=False),
        sa.Column('notes', sa.Text(), nullable=False, server_default=''),
    )
    op.create_index('ix_training_sessions_date', 'training_sessions', ['date'])

    # 2) working sets, ordered by position within their session
    op.create_table(
        'exercise_sets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('session_id', sa.Integer(), sa.ForeignKey('training_sessions.id', ondelete='CASCADE'), nullable=False),
        sa.Column('exercise_id', sa.String(length=64), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('reps', sa.Float(), nullable=False),
        sa.Column('rir', sa.Float(), nullable=True),
        sa.Column('note', sa.String(length=500), nullable=False, server_default=''),
    )
    op.create_index('ix_exercise_sets_session_id', 'exercise_sets', ['session_id'])


def downgrade() -> None:
    op.drop_index('ix_exercise_sets_session_id', table_name='exercise_sets')
    op.drop_table('exercise_sets')
    op.drop_index('ix_training_sessions_date', table_name='training_sessions')
    op.drop_table('training_sessions')
