"""
Restaurant endpoints for API v1.

Create and update run the payload through postal code validation and
the duplicate check before anything is written.  Each failure kind is
reported with its own status code:

* malformed postal code: 400
* duplicate name and postal code: 409
* unknown restaurant id: 404

Looking a restaurant up by name is different from looking it up by id:
an unknown name returns ``null`` instead of an error.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dining_review_api.app.core.errors import (
    DuplicateRestaurant,
    InvalidZipFormat,
    RestaurantError,
    RestaurantNotFound,
)
from dining_review_api.app.schemas.restaurant import (
    RestaurantCreate,
    RestaurantRead,
    RestaurantUpdate,
)
from dining_review_api.app.services.restaurant_service import RestaurantService

router = APIRouter()

_STATUS_BY_ERROR = {
    InvalidZipFormat: status.HTTP_400_BAD_REQUEST,
    DuplicateRestaurant: status.HTTP_409_CONFLICT,
    RestaurantNotFound: status.HTTP_404_NOT_FOUND,
}


def get_restaurant_service() -> RestaurantService:
    """Dependency returning a service bound to the SQLite store."""
    return RestaurantService()


def _http_error(exc: RestaurantError) -> HTTPException:
    code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=code, detail=str(exc))


@router.post(
    "/",
    response_model=RestaurantRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a restaurant",
)
async def create_restaurant(
    data: RestaurantCreate,
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantRead:
    try:
        return await service.create_restaurant(data)
    except RestaurantError as e:
        raise _http_error(e)


@router.put(
    "/{restaurant_id}",
    response_model=RestaurantRead,
    summary="Update a restaurant",
)
async def update_restaurant(
    restaurant_id: int,
    data: RestaurantUpdate,
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantRead:
    """Update name, postal code and country of a restaurant.

    The id in the path identifies the target; an ``id`` in the body is
    ignored.  Scores and city are never changed here.
    """
    try:
        return await service.update_restaurant(restaurant_id, data)
    except RestaurantError as e:
        raise _http_error(e)


@router.get("/", response_model=List[RestaurantRead], summary="List all restaurants")
async def list_restaurants(
    service: RestaurantService = Depends(get_restaurant_service),
) -> List[RestaurantRead]:
    return await service.list_restaurants()


@router.get(
    "/country/{country}",
    response_model=List[RestaurantRead],
    summary="List restaurants in a country",
)
async def list_by_country(
    country: str,
    ascending: bool = Query(True, description="Sort by name ascending (true) or descending (false)"),
    service: RestaurantService = Depends(get_restaurant_service),
) -> List[RestaurantRead]:
    return await service.list_by_country(country, ascending)


@router.get(
    "/city/{city}",
    response_model=List[RestaurantRead],
    summary="List restaurants in a city",
)
async def list_by_city(
    city: str,
    ascending: bool = Query(True, description="Sort by name ascending (true) or descending (false)"),
    service: RestaurantService = Depends(get_restaurant_service),
) -> List[RestaurantRead]:
    return await service.list_by_city(city, ascending)


@router.get(
    "/zipcode/{zip_code}",
    response_model=List[RestaurantRead],
    summary="List restaurants with a postal code",
)
async def list_by_zip_code(
    zip_code: str,
    ascending: bool = Query(True, description="Sort by name ascending (true) or descending (false)"),
    service: RestaurantService = Depends(get_restaurant_service),
) -> List[RestaurantRead]:
    try:
        return await service.list_by_zip_code(zip_code, ascending)
    except RestaurantError as e:
        raise _http_error(e)


@router.get(
    "/scores",
    response_model=List[RestaurantRead],
    summary="List scored restaurants with a postal code",
)
async def list_with_scores(
    zip_code: str = Query(..., description="Postal code to filter on"),
    service: RestaurantService = Depends(get_restaurant_service),
) -> List[RestaurantRead]:
    """Restaurants with at least one allergen average score, postal code descending."""
    try:
        return await service.list_with_scores_by_zip_code(zip_code)
    except RestaurantError as e:
        raise _http_error(e)


@router.get("/id/{restaurant_id}", response_model=RestaurantRead, summary="Get a restaurant by id")
async def get_restaurant(
    restaurant_id: int,
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantRead:
    try:
        return await service.get_restaurant(restaurant_id)
    except RestaurantError as e:
        raise _http_error(e)


@router.get(
    "/name/{name}",
    response_model=Optional[RestaurantRead],
    summary="Get a restaurant by name",
)
async def get_restaurant_by_name(
    name: str,
    service: RestaurantService = Depends(get_restaurant_service),
) -> Optional[RestaurantRead]:
    return await service.get_restaurant_by_name(name)
