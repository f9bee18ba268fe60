from nutribase.extensions import db

class Meal(db.Model):
    __tablename__ = "meals"

    id = db.Column("mealid", db.Integer, primary_key=True)
    name = db.Column("name", db.String(255), nullable=False)
    date = db.Column("date", db.Date, nullable=False)
    time = db.Column("time", db.Time, nullable=False)
    created_at = db.Column("createdat", db.DateTime, server_default=db.func.now())
    updated_at = db.Column("updatedat", db.DateTime, server_default=db.func.now(), onupdate=db.func.now())


class MealIngredient(db.Model):
    __tablename__ = "meal_ingredients"

    meal_id = db.Column(
        "mealid", db.Integer,
        db.ForeignKey("meals.mealid", onupdate="CASCADE", ondelete="CASCADE", link_to_name=True),
        primary_key=True,
    )
    ingredient_id = db.Column(
        "ingredientid", db.Integer,
        db.ForeignKey("ingredients.ingredientid", onupdate="CASCADE", ondelete="CASCADE", link_to_name=True),
        primary_key=True,
    )
    quantity_in_grams = db.Column("quantityingrams", db.Numeric(10, 2), nullable=False)
