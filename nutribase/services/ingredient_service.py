"""
Ingredient Service

Creates ingredients together with their nutrient profile, and assembles
an ingredient with its per-100 g nutrient list for reading.
"""

import logging
from typing import Iterable

from sqlalchemy.exc import IntegrityError

from nutribase.models.ingredient import Ingredient
from nutribase.models.nutrient import Nutrient, NutrientValue
from nutribase.services.nutrient_service import NutrientResolver
from nutribase.services.records import IngredientDetail, NutrientEntry, NutrientLine
from nutribase.services.units import per_100g
from nutribase.utils.errors import ConflictError, InternalError, NotFoundError, RequestValidationError

logger = logging.getLogger(__name__)


class IngredientWriter:
    def __init__(self, session, resolver: NutrientResolver = None):
        self.session = session
        self.resolver = resolver or NutrientResolver(session)

    def create(
        self,
        name: str,
        serving_size_in_grams: float,
        nutrients: Iterable[NutrientEntry],
    ) -> int:
        """
        Create an ingredient and its nutrient profile as one transaction.

        Args:
            name: Ingredient name, unique across ingredients
            serving_size_in_grams: Serving the nutrient amounts refer to
            nutrients: Amounts per serving, normalized to per 100 g on insert

        Returns:
            The new ingredient id

        Raises:
            RequestValidationError: If the serving size is not positive
            ConflictError: If an ingredient with this name already exists
            InternalError: If any insert fails; nothing from this call persists
        """
        if serving_size_in_grams is None or serving_size_in_grams <= 0:
            raise RequestValidationError("serving_size_in_grams must be greater than 0")

        if self._exists(name):
            raise ConflictError("Ingredient already exists")

        step = "inserting ingredient"
        try:
            ingredient = Ingredient(name=name)
            self.session.add(ingredient)
            self.session.flush()
            logger.info("Created ingredient %r with ID %s", name, ingredient.id)

            for entry in nutrients:
                step = f"resolving nutrient {entry.name!r}"
                nutrient_id = self.resolver.resolve(entry.name)

                step = f"inserting amount of {entry.name!r}"
                self.session.add(NutrientValue(
                    ingredient_id=ingredient.id,
                    nutrient_id=nutrient_id,
                    amount_per_100g=per_100g(entry.amount, serving_size_in_grams),
                ))
                self.session.flush()

            step = "committing"
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            logger.exception("Rolled back ingredient %r while %s", name, step)
            if isinstance(e, IntegrityError) and self._exists(name):
                raise ConflictError("Ingredient already exists") from e
            raise InternalError(f"Failed to create ingredient: {e}") from e

        return ingredient.id

    def _exists(self, name: str) -> bool:
        return self.session.query(Ingredient.id).filter(Ingredient.name == name).first() is not None

    def delete(self, ingredient_id: int) -> dict:
        """Delete an ingredient; its nutrient amounts and meal links cascade."""
        ingredient = self.session.get(Ingredient, ingredient_id)
        if not ingredient:
            raise NotFoundError("Ingredient not found")

        payload = {"ingredient_id": ingredient.id, "name": ingredient.name}
        try:
            self.session.delete(ingredient)
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            logger.exception("Failed to delete ingredient %s", ingredient_id)
            raise InternalError(f"Failed to delete ingredient: {e}") from e

        logger.info("Deleted ingredient %s", ingredient_id)
        return payload


class IngredientReader:
    def __init__(self, session):
        self.session = session

    def get(self, ingredient_id: int) -> IngredientDetail:
        ingredient = self.session.get(Ingredient, ingredient_id)
        if not ingredient:
            raise NotFoundError("Ingredient not found")

        rows = (
            self.session.query(Nutrient.name, NutrientValue.amount_per_100g)
            .join(NutrientValue, Nutrient.id == NutrientValue.nutrient_id)
            .filter(NutrientValue.ingredient_id == ingredient.id)
            .order_by(Nutrient.name)
            .all()
        )

        return IngredientDetail(
            ingredient_id=ingredient.id,
            name=ingredient.name,
            nutrients=[
                NutrientLine(name=nutrient_name, amount_per_100g=float(amount))
                for nutrient_name, amount in rows
            ],
        )
