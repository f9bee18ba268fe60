"""unique ingredient and nutrient names on adopted tables

Revision ID: 8d2f4b6a1c35
Revises: 3a7c1e90b2d4
Create Date: 2026-10-17 09:30:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '8d2f4b6a1c35'
down_revision = '3a7c1e90b2d4'
branch_labels = None
depends_on = None

CONSTRAINTS = (
    ('ingredients', 'uq_ingredient_name'),
    ('nutrients', 'uq_nutrient_name'),
)


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    for table, name in CONSTRAINTS:
        existing = {uc['name'] for uc in insp.get_unique_constraints(table)}
        if name not in existing:
            # Fails if the table already holds duplicate names; merge them first
            with op.batch_alter_table(table) as batch_op:
                batch_op.create_unique_constraint(name, ['name'])


def downgrade():
    # Constraints created by the initial revision are kept
    pass
