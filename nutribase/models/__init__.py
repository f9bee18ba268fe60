from nutribase.models.ingredient import Ingredient
from nutribase.models.nutrient import Nutrient, NutrientValue
from nutribase.models.meal import Meal, MealIngredient

__all__ = ["Ingredient", "Nutrient", "NutrientValue", "Meal", "MealIngredient"]
