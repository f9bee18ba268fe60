from datetime import datetime

from nutribase import create_app
from nutribase.extensions import db
from nutribase.models.ingredient import Ingredient
from nutribase.models.meal import Meal
from nutribase.services.ingredient_service import IngredientWriter
from nutribase.services.meal_service import MealWriter
from nutribase.services.records import MealIngredientEntry, NutrientEntry

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()
    writer = IngredientWriter(db.session)

    def add_ing(name, serving_g, nutrients):
        existing = Ingredient.query.filter_by(name=name).first()
        if existing:
            return existing.id
        return writer.create(name, serving_g, [NutrientEntry(n, a) for n, a in nutrients])

    oat = add_ing("Oat", 40, [("Energy", 155.6), ("Protein", 6.76), ("Carbohydrate", 26.5), ("Fat", 2.76)])
    egg = add_ing("Egg", 50, [("Energy", 77.5), ("Protein", 6.0), ("Fat", 5.5)])
    banana = add_ing("Banana", 118, [("Energy", 105.0), ("Protein", 1.3), ("Carbohydrate", 27.0)])

    if not Meal.query.filter_by(name="Breakfast").first():
        MealWriter(db.session).create("Breakfast", datetime(2024, 1, 1, 8, 0), [
            MealIngredientEntry(oat, 60),
            MealIngredientEntry(egg, 50),
            MealIngredientEntry(banana, 100),
        ])

    print("✅ Seed completed.")
