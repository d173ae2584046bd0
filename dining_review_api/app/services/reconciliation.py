"""
Merging an update payload onto a stored restaurant.
"""

from dining_review_api.app.schemas.restaurant import RestaurantRead, RestaurantUpdate


def reconcile(stored: RestaurantRead, incoming: RestaurantUpdate) -> RestaurantRead:
    """Return the record to persist when ``incoming`` updates ``stored``.

    ``name`` and ``zip_code`` are replaced whenever they differ from the
    stored value, including when the incoming value is ``None``.
    ``country`` is replaced only when a value is provided.  The id, the
    city and every score field are kept from ``stored``.
    """
    changes = {}
    if stored.name != incoming.name:
        changes["name"] = incoming.name
    if stored.zip_code != incoming.zip_code:
        changes["zip_code"] = incoming.zip_code
    if incoming.country is not None:
        changes["country"] = incoming.country
    return stored.model_copy(update=changes)
