"""
Nutrient Service

Resolves nutrient names to shared reference rows, creating a row the
first time a name is seen.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from nutribase.models.nutrient import Nutrient

logger = logging.getLogger(__name__)


class NutrientResolver:
    """
    Look up or create ``Nutrient`` rows inside the caller's transaction.

    ``nutrients.name`` is unique, so two requests racing on the same new
    name cannot both insert: the loser's insert fails inside a savepoint,
    which is rolled back before the name is looked up again.
    """

    def __init__(self, session):
        self.session = session

    def find(self, name: str) -> Optional[int]:
        nutrient_id = (
            self.session.query(Nutrient.id)
            .filter(Nutrient.name == name)
            .scalar()
        )
        return nutrient_id

    def resolve(self, name: str) -> int:
        nutrient_id = self.find(name)
        if nutrient_id is not None:
            logger.debug("Reusing nutrient %r (id=%s)", name, nutrient_id)
            return nutrient_id

        nutrient = Nutrient(name=name)
        try:
            with self.session.begin_nested():
                self.session.add(nutrient)
        except IntegrityError:
            # Inserted concurrently by another transaction since our lookup
            nutrient_id = self.find(name)
            if nutrient_id is None:
                raise
            logger.info("Nutrient %r created concurrently, reusing id=%s", name, nutrient_id)
            return nutrient_id

        logger.info("Created nutrient %r (id=%s)", name, nutrient.id)
        return nutrient.id
