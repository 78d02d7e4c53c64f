"""initial calorie tracker schema

Revision ID: 3a7c1e9d2b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c1e9d2b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'profiles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, unique=True),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('weight', sa.Float(), nullable=False, server_default='70'),
        sa.Column('height', sa.Float(), nullable=False, server_default='170'),
        sa.Column('age', sa.Integer(), nullable=False, server_default='25'),
        sa.Column('sex', sa.String(length=10), nullable=False, server_default='male'),
        sa.Column('activity_level', sa.String(length=20), nullable=False, server_default='moderate'),
        sa.Column('calorie_goal', sa.Float(), nullable=True),
        sa.Column('protein_goal', sa.Float(), nullable=True),
        sa.Column('carbs_goal', sa.Float(), nullable=True),
        sa.Column('fat_goal', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'daily_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('log_date', sa.Date(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('user_id', 'log_date', name='uq_daily_log_user_date'),
    )

    op.create_table(
        'meal_plans',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('target_calories', sa.Float(), nullable=False, server_default='0'),
        sa.Column('meal_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_default', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_meal_plans_user_id', 'meal_plans', ['user_id'])

    op.create_table(
        'food_entries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('daily_log_id', sa.Integer(), sa.ForeignKey('daily_logs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('meal_plan_id', sa.Integer(), sa.ForeignKey('meal_plans.id', ondelete='SET NULL'), nullable=True),
        sa.Column('food_name', sa.String(length=200), nullable=False),
        sa.Column('quantity_grams', sa.Float(), nullable=False),
        sa.Column('calories', sa.Float(), nullable=False),
        sa.Column('protein', sa.Float(), nullable=False, server_default='0'),
        sa.Column('carbs', sa.Float(), nullable=False, server_default='0'),
        sa.Column('fat', sa.Float(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_food_entries_user_id', 'food_entries', ['user_id'])
    op.create_index('ix_food_entries_daily_log_id', 'food_entries', ['daily_log_id'])

    op.create_table(
        'planned_foods',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('meal_plan_id', sa.Integer(), sa.ForeignKey('meal_plans.id', ondelete='CASCADE'), nullable=False),
        sa.Column('food_name', sa.String(length=200), nullable=False),
        sa.Column('quantity_grams', sa.Float(), nullable=False),
        sa.Column('calories', sa.Float(), nullable=False),
        sa.Column('protein', sa.Float(), nullable=False, server_default='0'),
        sa.Column('carbs', sa.Float(), nullable=False, server_default='0'),
        sa.Column('fat', sa.Float(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_planned_foods_meal_plan_id', 'planned_foods', ['meal_plan_id'])

    op.create_table(
        'custom_foods',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('food_name', sa.String(length=200), nullable=False),
        sa.Column('calories_per_100g', sa.Float(), nullable=False),
        sa.Column('protein_per_100g', sa.Float(), nullable=False, server_default='0'),
        sa.Column('carbs_per_100g', sa.Float(), nullable=False, server_default='0'),
        sa.Column('fat_per_100g', sa.Float(), nullable=False, server_default='0'),
        sa.Column('brand', sa.String(length=120), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_custom_foods_user_name', 'custom_foods', ['user_id', 'food_name'])


def downgrade():
    op.drop_index('ix_custom_foods_user_name', table_name='custom_foods')
    op.drop_table('custom_foods')
    op.drop_index('ix_planned_foods_meal_plan_id', table_name='planned_foods')
    op.drop_table('planned_foods')
    op.drop_index('ix_food_entries_daily_log_id', table_name='food_entries')
    op.drop_index('ix_food_entries_user_id', table_name='food_entries')
    op.drop_table('food_entries')
    op.drop_index('ix_meal_plans_user_id', table_name='meal_plans')
    op.drop_table('meal_plans')
    op.drop_table('daily_logs')
    op.drop_table('profiles')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
