"""unique custom food name per user, ignoring case

Revision ID: 8e2f4b6d1c93
Revises: 3a7c1e9d2b40
Create Date: 2026-10-19 15:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '8e2f4b6d1c93'
down_revision = '3a7c1e9d2b40'
branch_labels = None
depends_on = None


def upgrade():
    op.drop_index('ix_custom_foods_user_name', table_name='custom_foods')
    op.create_index(
        'uq_custom_foods_user_lower_name',
        'custom_foods',
        ['user_id', sa.text('lower(food_name)')],
        unique=True,
    )


def downgrade():
    op.drop_index('uq_custom_foods_user_lower_name', table_name='custom_foods')
    op.create_index('ix_custom_foods_user_name', 'custom_foods', ['user_id', 'food_name'])
