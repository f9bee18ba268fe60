"""
Meal Service

Handles meal creation, adding ingredients to an existing meal, deletion
and the meal detail view.
"""

import logging
from datetime import datetime
from typing import Iterable

from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError

from nutribase.models.ingredient import Ingredient
from nutribase.models.meal import Meal, MealIngredient
from nutribase.services.records import MealDetail, MealIngredientEntry, MealIngredientLine, MealIngredientLink
from nutribase.utils.errors import ConflictError, IntegrityViolationError, InternalError, NotFoundError

logger = logging.getLogger(__name__)


class MealWriter:
    def __init__(self, session):
        self.session = session

    def create(self, name: str, date_time: datetime, ingredients: Iterable[MealIngredientEntry]) -> int:
        """
        Create a meal and its ingredient links as one transaction.

        ``date_time`` fills both the date and the time-of-day column, using
        the wall clock of the supplied timestamp.

        Raises:
            IntegrityViolationError: If a linked ingredient does not exist
            InternalError: For any other store failure
        """
        try:
            meal = Meal(name=name, date=date_time.date(), time=date_time.time())
            self.session.add(meal)
            self.session.flush()

            for entry in ingredients:
                self.session.add(MealIngredient(
                    meal_id=meal.id,
                    ingredient_id=entry.ingredient_id,
                    quantity_in_grams=entry.amount_in_grams,
                ))
                self.session.flush()

            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning("Rolled back meal %r: %s", name, e.orig)
            raise IntegrityViolationError("Meal references an ingredient that does not exist") from e
        except Exception as e:
            self.session.rollback()
            logger.exception("Rolled back meal %r", name)
            raise InternalError(f"Failed to create meal: {e}") from e

        logger.info("Created meal %r with ID %s", name, meal.id)
        return meal.id

    def add_ingredient(self, meal_id: int, ingredient_id: int, amount_in_grams: float) -> MealIngredientLink:
        """
        Link one more ingredient to an existing meal.

        The composite primary key is the only duplicate guard: a second link
        for the same pair is reported as a conflict.
        """
        try:
            self.session.execute(
                insert(MealIngredient).values(
                    meal_id=meal_id,
                    ingredient_id=ingredient_id,
                    quantity_in_grams=amount_in_grams,
                )
            )
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if self.session.get(MealIngredient, (meal_id, ingredient_id)) is not None:
                raise ConflictError("Ingredient is already part of this meal") from e
            logger.warning("Rejected link meal=%s ingredient=%s: %s", meal_id, ingredient_id, e.orig)
            raise IntegrityViolationError("Meal or ingredient does not exist") from e
        except Exception as e:
            self.session.rollback()
            logger.exception("Failed to add ingredient %s to meal %s", ingredient_id, meal_id)
            raise InternalError(f"Failed to add ingredient to meal: {e}") from e

        logger.info("Added ingredient %s to meal %s", ingredient_id, meal_id)
        return MealIngredientLink(
            ingredient_id=ingredient_id,
            meal_id=meal_id,
            amount_in_grams=float(amount_in_grams),
        )

    def delete(self, meal_id: int) -> dict:
        """Delete a meal; its ingredient links cascade."""
        meal = self.session.get(Meal, meal_id)
        if not meal:
            raise NotFoundError("Meal not found")

        payload = {"meal_id": meal.id, "name": meal.name}
        try:
            self.session.delete(meal)
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            logger.exception("Failed to delete meal %s", meal_id)
            raise InternalError(f"Failed to delete meal: {e}") from e

        logger.info("Deleted meal %s", meal_id)
        return payload


class MealReader:
    def __init__(self, session):
        self.session = session

    def get(self, meal_id: int) -> MealDetail:
        meal = self.session.get(Meal, meal_id)
        if not meal:
            raise NotFoundError("Meal not found")

        lines = []
        links = (
            self.session.query(MealIngredient)
            .filter(MealIngredient.meal_id == meal.id)
            .order_by(MealIngredient.ingredient_id)
            .all()
        )
        for link in links:
            ingredient_name = (
                self.session.query(Ingredient.name)
                .filter(Ingredient.id == link.ingredient_id)
                .scalar()
            )
            lines.append(MealIngredientLine(
                ingredient_id=link.ingredient_id,
                amount_in_grams=float(link.quantity_in_grams),
                name=ingredient_name,
            ))

        return MealDetail(
            meal_id=meal.id,
            name=meal.name,
            date=meal.date.isoformat(),
            time=meal.time.isoformat(),
            ingredients=lines,
        )
