from .home_routes import home_bp
from .ingredient_routes import bp as ingredient_bp
from .meal_routes import bp as meal_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(ingredient_bp)
    app.register_blueprint(meal_bp)
