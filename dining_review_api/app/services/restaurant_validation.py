"""
Validation of restaurant payloads.

A postal code is up to ten characters from lowercase letters, digits,
hyphen and space, followed by one trailing lowercase letter or digit.
Uppercase letters are rejected as written; whether they should be
normalised first is still an open product question.

``validate_restaurant`` checks the postal code and then looks for an
existing restaurant with the same name and postal code.  The first
failure wins, so the store is not queried for a malformed code.
"""

import logging
import re
from typing import Optional

from dining_review_api.app.core.errors import DuplicateRestaurant, InvalidZipFormat
from dining_review_api.app.repositories.restaurant_repository import RestaurantStore

logger = logging.getLogger(__name__)

ZIP_CODE_PATTERN = re.compile(r"[a-z0-9\- ]{0,10}[a-z0-9]")


def is_valid_zip_code(zip_code: Optional[str]) -> bool:
    """Return ``True`` if ``zip_code`` matches the postal code grammar."""
    if zip_code is None:
        return False
    return ZIP_CODE_PATTERN.fullmatch(zip_code) is not None


def validate_zip_code(zip_code: Optional[str]) -> None:
    """Raise ``InvalidZipFormat`` unless ``zip_code`` is well formed."""
    if not is_valid_zip_code(zip_code):
        logger.warning("Rejected malformed zip code %r", zip_code)
        raise InvalidZipFormat(zip_code)


def validate_restaurant(candidate, store: RestaurantStore) -> None:
    """Validate a create or update payload against ``store``.

    ``candidate`` is any object with ``name`` and ``zip_code``
    attributes.  The duplicate check uses the candidate's own values,
    so an update that keeps a record's current name and postal code is
    rejected as a duplicate of itself.
    """
    validate_zip_code(candidate.zip_code)
    if store.exists_by_name_and_zip_code(candidate.name, candidate.zip_code):
        logger.warning(
            "Rejected duplicate restaurant %r (%s)", candidate.name, candidate.zip_code
        )
        raise DuplicateRestaurant(candidate.name, candidate.zip_code)
