from nutribase.extensions import db

class Nutrient(db.Model):
    __tablename__ = "nutrients"

    id = db.Column("nutrientid", db.Integer, primary_key=True)
    name = db.Column("name", db.String(255), nullable=False)
    created_at = db.Column("createdat", db.DateTime, server_default=db.func.now())
    updated_at = db.Column("updatedat", db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    __table_args__ = (
        db.UniqueConstraint("name", name="uq_nutrient_name"),
    )


class NutrientValue(db.Model):
    """Amount of one nutrient per 100 g of one ingredient."""
    __tablename__ = "nutrient_values"

    ingredient_id = db.Column(
        "ingredientid", db.Integer,
        db.ForeignKey("ingredients.ingredientid", onupdate="CASCADE", ondelete="CASCADE", link_to_name=True),
        primary_key=True,
    )
    nutrient_id = db.Column(
        "nutrientid", db.Integer,
        db.ForeignKey("nutrients.nutrientid", onupdate="CASCADE", ondelete="CASCADE", link_to_name=True),
        primary_key=True,
    )
    amount_per_100g = db.Column("amountper100g", db.Numeric(10, 2), nullable=False)
