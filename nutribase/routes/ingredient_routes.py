from flask import Blueprint
from nutribase.controllers.ingredient_controller import create_ingredient, get_ingredient, delete_ingredient

bp = Blueprint("ingredients", __name__, url_prefix="/api/ingredients")

@bp.route("", methods=["POST"])
def create():
    return create_ingredient()

@bp.route("/<int:id>", methods=["GET"])
def detail(id):
    return get_ingredient(id)

@bp.route("/<int:id>", methods=["DELETE"])
def delete(id):
    return delete_ingredient(id)
