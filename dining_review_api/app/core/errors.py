"""
Failure kinds raised by the restaurant services.

All of them are client errors detected locally; none is retried.  They
subclass ``ValueError`` so callers that only care about "bad request"
can catch the base class, while the endpoints catch each kind
separately and map it to its own HTTP status.
"""


class RestaurantError(ValueError):
    """Base class for restaurant validation and lookup failures."""


class InvalidZipFormat(RestaurantError):
    """The postal code does not match the accepted grammar."""

    def __init__(self, zip_code):
        self.zip_code = zip_code
        super().__init__("The provided zipcode is of an invalid format.")


class DuplicateRestaurant(RestaurantError):
    """A restaurant with the same name and postal code already exists."""

    def __init__(self, name, zip_code):
        self.name = name
        self.zip_code = zip_code
        super().__init__(
            "The provided restaurant already exists in the database. "
            "Please enter a different one."
        )


class RestaurantNotFound(RestaurantError):
    """No restaurant is stored under the given identifier."""

    def __init__(self, restaurant_id: int):
        self.restaurant_id = restaurant_id
        super().__init__(f"Restaurant {restaurant_id} not found")
