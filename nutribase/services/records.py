"""
Named request and response records.

Field names match the JSON contract of the API, so ``asdict`` on any of
these is the response body.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List


@dataclass
class NutrientEntry:
    name: str
    amount: float


@dataclass
class MealIngredientEntry:
    ingredient_id: int
    amount_in_grams: float


@dataclass
class NutrientLine:
    name: str
    amount_per_100g: float


@dataclass
class IngredientDetail:
    ingredient_id: int
    name: str
    nutrients: List[NutrientLine] = field(default_factory=list)


@dataclass
class MealIngredientLine:
    ingredient_id: int
    amount_in_grams: float
    name: str


@dataclass
class MealDetail:
    meal_id: int
    name: str
    date: str
    time: str
    ingredients: List[MealIngredientLine] = field(default_factory=list)


@dataclass
class MealIngredientLink:
    ingredient_id: int
    meal_id: int
    amount_in_grams: float


def to_payload(record) -> Dict[str, Any]:
    return asdict(record)
