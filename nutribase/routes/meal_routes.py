from flask import Blueprint
from nutribase.controllers.meal_controller import create_meal, get_meal, add_ingredient_to_meal, delete_meal

bp = Blueprint("meals", __name__, url_prefix="/api/meals")

@bp.route("", methods=["POST"])
def create():
    return create_meal()

@bp.route("/<int:id>", methods=["GET"])
def detail(id):
    return get_meal(id)

@bp.route("/<int:id>/ingredients", methods=["PUT"])
def add_ingredient(id):
    return add_ingredient_to_meal(id)

@bp.route("/<int:id>", methods=["DELETE"])
def delete(id):
    return delete_meal(id)
