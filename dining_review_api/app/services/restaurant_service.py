"""
Business logic for restaurants.

``RestaurantService`` validates and persists new restaurants, applies
updates through ``reconcile`` and dispatches the read queries to a
``RestaurantStore``.  Failures are raised as the exception kinds from
``core.errors``; translating them to HTTP responses is left to the
endpoints.

Validation and the subsequent save are separate store calls, so two
concurrent requests for the same name and postal code can both pass
validation and both be stored.
"""

import logging
from typing import List, Optional

from dining_review_api.app.core.errors import RestaurantNotFound
from dining_review_api.app.repositories.restaurant_repository import (
    RestaurantStore,
    SQLiteRestaurantRepository,
)
from dining_review_api.app.schemas.restaurant import (
    RestaurantCreate,
    RestaurantRead,
    RestaurantUpdate,
)
from dining_review_api.app.services.reconciliation import reconcile
from dining_review_api.app.services.restaurant_validation import (
    validate_restaurant,
    validate_zip_code,
)

logger = logging.getLogger(__name__)


class RestaurantService:
    """Service for creating, updating and querying restaurants."""

    def __init__(self, store: Optional[RestaurantStore] = None):
        self.store = store if store is not None else SQLiteRestaurantRepository()

    async def create_restaurant(self, data: RestaurantCreate) -> RestaurantRead:
        """Validate ``data`` and store it as a new restaurant.

        Raises ``InvalidZipFormat`` or ``DuplicateRestaurant``; nothing
        is written in either case.
        """
        validate_restaurant(data, self.store)
        created = self.store.save(RestaurantRead(**data.model_dump()))
        logger.info("Created restaurant %s (%r, %s)", created.id, created.name, created.zip_code)
        return created

    async def update_restaurant(self, restaurant_id: int, data: RestaurantUpdate) -> RestaurantRead:
        """Apply ``data`` to the restaurant stored under ``restaurant_id``.

        The payload is validated first, exactly as on create.  Then the
        target is loaded (``RestaurantNotFound`` if missing), merged
        with ``reconcile`` and saved.  The merged record is returned.
        """
        validate_restaurant(data, self.store)
        stored = self.store.find_by_id(restaurant_id)
        if stored is None:
            raise RestaurantNotFound(restaurant_id)
        merged = self.store.save(reconcile(stored, data))
        logger.info("Updated restaurant %s", restaurant_id)
        return merged

    async def get_restaurant(self, restaurant_id: int) -> RestaurantRead:
        restaurant = self.store.find_by_id(restaurant_id)
        if restaurant is None:
            raise RestaurantNotFound(restaurant_id)
        return restaurant

    async def get_restaurant_by_name(self, name: str) -> Optional[RestaurantRead]:
        """Return the restaurant called ``name``, or ``None``."""
        return self.store.find_by_name(name)

    async def list_restaurants(self) -> List[RestaurantRead]:
        return self.store.list_all()

    async def list_by_country(self, country: str, ascending: bool = True) -> List[RestaurantRead]:
        return self.store.list_by_country(country, ascending)

    async def list_by_city(self, city: str, ascending: bool = True) -> List[RestaurantRead]:
        return self.store.list_by_city(city, ascending)

    async def list_by_zip_code(self, zip_code: str, ascending: bool = True) -> List[RestaurantRead]:
        validate_zip_code(zip_code)
        return self.store.list_by_zip_code(zip_code, ascending)

    async def list_with_scores_by_zip_code(self, zip_code: str) -> List[RestaurantRead]:
        """Restaurants in ``zip_code`` with at least one allergen average score.

        Ordered by postal code descending rather than by name.
        """
        validate_zip_code(zip_code)
        return self.store.list_with_any_score_by_zip_code(zip_code)
