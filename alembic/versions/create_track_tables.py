"""create_track_tables

Revision ID: create_track_tables
Revises: 
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'create_track_tables'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create tracks, exercises, sessions, blocks and block_exercises."""
    op.create_table(
        'tracks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('slug', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('days_per_week', sa.Integer(), nullable=False),
        sa.Column('sessions_per_day', sa.Integer(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_tracks'),
    )
    op.create_index('ix_tracks_slug', 'tracks', ['slug'], unique=True)

    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('category', sa.String(length=64), nullable=True),
        sa.Column('equipment', sa.JSON(), nullable=False),
        sa.Column('skill_level', sa.String(length=32), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_exercises'),
    )
    op.create_index('ix_exercises_name', 'exercises', ['name'])

    op.create_table(
        'sessions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('track_id', sa.Integer(), nullable=False),
        sa.Column('week_number', sa.Integer(), nullable=False),
        sa.Column('day_of_week', sa.Integer(), nullable=False),
        sa.Column('sub_session_label', sa.String(length=8), nullable=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('focus', sa.String(length=64), nullable=False),
        sa.Column('session_type', sa.String(length=32), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('intensity_level', sa.Integer(), nullable=False),
        sa.Column('is_published', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['track_id'], ['tracks.id'], ondelete='CASCADE', name='fk_sessions_track_id'),
        sa.PrimaryKeyConstraint('id', name='pk_sessions'),
        sa.UniqueConstraint(
            'track_id', 'week_number', 'day_of_week', 'sub_session_label',
            name='uq_session_coordinate',
        ),
    )
    op.create_index('idx_sessions_track_week', 'sessions', ['track_id', 'week_number'])
    op.create_index(
        'uq_session_single_slot',
        'sessions',
        ['track_id', 'week_number', 'day_of_week'],
        unique=True,
        sqlite_where=sa.text('sub_session_label IS NULL'),
        postgresql_where=sa.text('sub_session_label IS NULL'),
    )

    op.create_table(
        'blocks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('session_id', sa.Integer(), nullable=False),
        sa.Column('block_type', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('sequence', sa.Integer(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['session_id'], ['sessions.id'], ondelete='CASCADE', name='fk_blocks_session_id'),
        sa.PrimaryKeyConstraint('id', name='pk_blocks'),
        sa.UniqueConstraint('session_id', 'sequence', name='uq_block_sequence'),
    )
    op.create_index('ix_blocks_session_id', 'blocks', ['session_id'])

    op.create_table(
        'block_exercises',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('block_id', sa.Integer(), nullable=False),
        sa.Column('exercise_id', sa.Integer(), nullable=False),
        sa.Column('sequence', sa.Integer(), nullable=False),
        sa.Column('sets', sa.Integer(), nullable=True),
        sa.Column('reps', sa.String(length=64), nullable=True),
        sa.Column('duration_seconds', sa.Integer(), nullable=True),
        sa.Column('load_type', sa.String(length=16), nullable=False),
        sa.Column('load_value', sa.Float(), nullable=True),
        sa.Column('rest_seconds', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('scaling_notes', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['block_id'], ['blocks.id'], ondelete='CASCADE', name='fk_block_exercises_block_id'),
        sa.ForeignKeyConstraint(['exercise_id'], ['exercises.id'], name='fk_block_exercises_exercise_id'),
        sa.PrimaryKeyConstraint('id', name='pk_block_exercises'),
    )
    op.create_index('ix_block_exercises_block_id', 'block_exercises', ['block_id'])


def downgrade() -> None:
    """Drop the track tables."""
    op.drop_index('ix_block_exercises_block_id', table_name='block_exercises')
    op.drop_table('block_exercises')
    op.drop_index('ix_blocks_session_id', table_name='blocks')
    op.drop_table('blocks')
    op.drop_index('uq_session_single_slot', table_name='sessions')
    op.drop_index('idx_sessions_track_week', table_name='sessions')
    op.drop_table('sessions')
    op.drop_index('ix_exercises_name', table_name='exercises')
    op.drop_table('exercises')
    op.drop_index('ix_tracks_slug', table_name='tracks')
    op.drop_table('tracks')
