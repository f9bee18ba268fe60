from flask import current_app

from nutribase.extensions import db
from nutribase.schemas.ingredient_schema import CreateIngredientSchema
from nutribase.services.ingredient_service import IngredientReader, IngredientWriter
from nutribase.services.records import to_payload
from nutribase.utils.http import ok, json_body


def create_ingredient():
    """
    Create an ingredient with its nutrient profile.

    Body Parameters:
        - name (required): Ingredient name, unique
        - serving_size_in_grams (required): Serving the amounts refer to
        - nutrients (required): List of {name, amount} per serving
    """
    data = CreateIngredientSchema().load(json_body())

    ingredient_id = IngredientWriter(db.session).create(
        name=data["name"],
        serving_size_in_grams=data["serving_size_in_grams"],
        nutrients=data["nutrients"],
    )
    current_app.logger.info(f"Ingredient {ingredient_id} created")
    return ok({"ingredient_id": ingredient_id}, 201)


def get_ingredient(id):
    detail = IngredientReader(db.session).get(id)
    return ok(to_payload(detail))


def delete_ingredient(id):
    return ok(IngredientWriter(db.session).delete(id))
