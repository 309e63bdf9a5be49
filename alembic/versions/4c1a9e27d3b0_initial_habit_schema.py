"""initial habit schema

Revision ID: 4c1a9e27d3b0
Revises:
Create Date: 2025-11-25 22:27:26.688271

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1a9e27d3b0'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(), nullable=False, unique=True),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])

    op.create_table(
        'habits',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('icon', sa.String(), nullable=False),
        sa.Column('color', sa.String(), nullable=False),
        sa.Column('weekdays', sa.String(), nullable=False),
        sa.Column('reminder_time', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=True),
    )
    op.create_index('ix_habits_id', 'habits', ['id'])

    # One record per habit per day; children go with the habit
    op.create_table(
        'habit_completions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('habit_id', sa.Integer(), sa.ForeignKey('habits.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('habit_id', 'date', name='uq_habit_completion_date'),
    )
    op.create_index('ix_habit_completions_id', 'habit_completions', ['id'])
    op.create_index('ix_habit_completions_habit_id', 'habit_completions', ['habit_id'])


def downgrade() -> None:
    op.drop_index('ix_habit_completions_habit_id', table_name='habit_completions')
    op.drop_index('ix_habit_completions_id', table_name='habit_completions')
    op.drop_table('habit_completions')
    op.drop_index('ix_habits_id', table_name='habits')
    op.drop_table('habits')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
