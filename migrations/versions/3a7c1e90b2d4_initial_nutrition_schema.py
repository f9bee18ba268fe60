"""initial nutrition schema

Revision ID: 3a7c1e90b2d4
Revises: 
Create Date: 2026-10-17 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c1e90b2d4'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('createdat', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('updatedat', sa.DateTime(), server_default=sa.func.now(), nullable=True),
    ]


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    # Tables may already exist when adopting a database created by the previous service
    if not insp.has_table('ingredients'):
        op.create_table(
            'ingredients',
            sa.Column('ingredientid', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=255), nullable=False),
            *_timestamps(),
            sa.UniqueConstraint('name', name='uq_ingredient_name'),
        )

    if not insp.has_table('nutrients'):
        op.create_table(
            'nutrients',
            sa.Column('nutrientid', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=255), nullable=False),
            *_timestamps(),
            sa.UniqueConstraint('name', name='uq_nutrient_name'),
        )

    if not insp.has_table('nutrient_values'):
        op.create_table(
            'nutrient_values',
            sa.Column('ingredientid', sa.Integer(), nullable=False),
            sa.Column('nutrientid', sa.Integer(), nullable=False),
            sa.Column('amountper100g', sa.Numeric(10, 2), nullable=False),
            sa.PrimaryKeyConstraint('ingredientid', 'nutrientid'),
            sa.ForeignKeyConstraint(['ingredientid'], ['ingredients.ingredientid'], onupdate='CASCADE', ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['nutrientid'], ['nutrients.nutrientid'], onupdate='CASCADE', ondelete='CASCADE'),
        )

    if not insp.has_table('meals'):
        op.create_table(
            'meals',
            sa.Column('mealid', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('time', sa.Time(), nullable=False),
            *_timestamps(),
        )

    if not insp.has_table('meal_ingredients'):
        op.create_table(
            'meal_ingredients',
            sa.Column('mealid', sa.Integer(), nullable=False),
            sa.Column('ingredientid', sa.Integer(), nullable=False),
            sa.Column('quantityingrams', sa.Numeric(10, 2), nullable=False),
            sa.PrimaryKeyConstraint('mealid', 'ingredientid'),
            sa.ForeignKeyConstraint(['mealid'], ['meals.mealid'], onupdate='CASCADE', ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['ingredientid'], ['ingredients.ingredientid'], onupdate='CASCADE', ondelete='CASCADE'),
        )


def downgrade():
    # Drop in reverse dependency order
    for tbl in (
        'meal_ingredients',
        'meals',
        'nutrient_values',
        'nutrients',
        'ingredients',
    ):
        op.drop_table(tbl)
