from flask import current_app

from nutribase.extensions import db
from nutribase.schemas.meal_schema import AddMealIngredientSchema, CreateMealSchema
from nutribase.services.meal_service import MealReader, MealWriter
from nutribase.services.records import to_payload
from nutribase.utils.http import ok, json_body


def create_meal():
    """
    Create a meal with its ingredients.

    Body Parameters:
        - name (required): Meal name
        - date_time (required): ISO timestamp, stored as the meal's date and time
        - ingredients (optional): List of {ingredient_id, amount_in_grams}
    """
    data = CreateMealSchema().load(json_body())

    meal_id = MealWriter(db.session).create(
        name=data["name"],
        date_time=data["date_time"],
        ingredients=data["ingredients"],
    )
    current_app.logger.info(f"Meal {meal_id} created")
    return ok({"meal_id": meal_id}, 201)


def get_meal(id):
    return ok(to_payload(MealReader(db.session).get(id)))


def add_ingredient_to_meal(id):
    """
    Add one ingredient to an existing meal.

    Body Parameters:
        - ingredient_id (required)
        - amount_in_grams (required)
    """
    entry = AddMealIngredientSchema().load(json_body())

    link = MealWriter(db.session).add_ingredient(id, entry.ingredient_id, entry.amount_in_grams)
    return ok(to_payload(link), 201)


def delete_meal(id):
    return ok(MealWriter(db.session).delete(id))
