from flask import Blueprint
from nutribase.controllers.home_controller import health_check

home_bp = Blueprint("home", __name__)

@home_bp.get("/health")
def health():
    return health_check()
