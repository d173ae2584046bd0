"""Tests for the SQLite restaurant repository and migrations."""

from dining_review_api.app.core.db import MIGRATIONS, get_connection, init_db
from dining_review_api.app.repositories.restaurant_repository import SQLiteRestaurantRepository
from dining_review_api.app.schemas.restaurant import RestaurantCreate, RestaurantRead
from dining_review_api.app.services.restaurant_validation import validate_restaurant


def _add(repo, name, zip_code, country=None, city=None):
    return repo.save(RestaurantRead(name=name, zip_code=zip_code, country=country, city=city))


def test_init_db_is_repeatable(database):
    init_db()
    conn = get_connection()
    try:
        versions = [row["version"] for row in conn.execute("SELECT version FROM migrations")]
    finally:
        conn.close()
    assert versions == [version for version, _ in MIGRATIONS]


def test_save_inserts_then_updates(database):
    repo = SQLiteRestaurantRepository()
    created = _add(repo, "Luigi", "10001", "US", "New York")
    assert created.id is not None

    updated = repo.save(created.model_copy(update={"country": "IT"}))
    assert updated.id == created.id
    assert repo.find_by_id(created.id).country == "IT"
    assert len(repo.list_all()) == 1


def test_save_does_not_write_scores(database, set_scores):
    repo = SQLiteRestaurantRepository()
    created = _add(repo, "Luigi", "10001")
    set_scores(created.id, egg=4.5, overall=4.5)

    repo.save(created.model_copy(update={"average_score_egg": 1.0, "name": "Mario"}))

    stored = repo.find_by_id(created.id)
    assert stored.name == "Mario"
    assert stored.average_score_egg == 4.5
    assert stored.overall_score == 4.5


def test_exists_by_name_and_zip_code(database):
    repo = SQLiteRestaurantRepository()
    _add(repo, "Luigi", "10001")

    assert repo.exists_by_name_and_zip_code("Luigi", "10001")
    assert not repo.exists_by_name_and_zip_code("luigi", "10001")
    assert not repo.exists_by_name_and_zip_code("Luigi", "10002")


def test_exists_matches_null_name(database):
    repo = SQLiteRestaurantRepository()
    _add(repo, None, "10001")
    assert repo.exists_by_name_and_zip_code(None, "10001")


def test_find_by_name_missing_returns_none(database):
    assert SQLiteRestaurantRepository().find_by_name("Nobody") is None


def test_find_by_name_prefers_lowest_id(database):
    repo = SQLiteRestaurantRepository()
    first = _add(repo, "Twin", "1")
    _add(repo, "Twin", "2")
    assert repo.find_by_name("Twin").id == first.id


def test_name_ordering_is_reversible(database):
    repo = SQLiteRestaurantRepository()
    for name in ["b", "a", "c", "a"]:
        _add(repo, name, "1", country="FR", city="Paris")

    ascending = repo.list_by_country("FR", True)
    descending = repo.list_by_country("FR", False)

    assert [r.name for r in ascending] == ["a", "a", "b", "c"]
    assert descending == list(reversed(ascending))
    assert repo.list_by_city("Paris", False) == descending
    assert repo.list_by_zip_code("1", True) == ascending


def test_list_with_any_score(database, set_scores):
    repo = SQLiteRestaurantRepository()
    egg = _add(repo, "Egg", "1")
    dairy = _add(repo, "Dairy", "1")
    _add(repo, "Plain", "1")
    overall_only = _add(repo, "Overall", "1")
    elsewhere = _add(repo, "Elsewhere", "2")
    set_scores(egg.id, egg=3.0)
    set_scores(dairy.id, dairy=2.0)
    set_scores(overall_only.id, overall=5.0)
    set_scores(elsewhere.id, peanut=1.0)

    result = repo.list_with_any_score_by_zip_code("1")

    assert {r.name for r in result} == {"Egg", "Dairy"}


def test_concurrent_creates_can_both_pass_validation(database):
    # Validation and save are separate steps; interleaving two requests
    # for the same pair stores a duplicate.
    repo = SQLiteRestaurantRepository()
    first = RestaurantCreate(name="Race", zip_code="1")
    second = RestaurantCreate(name="Race", zip_code="1")

    validate_restaurant(first, repo)
    validate_restaurant(second, repo)
    repo.save(RestaurantRead(**first.model_dump()))
    repo.save(RestaurantRead(**second.model_dump()))

    assert len(repo.list_by_zip_code("1", True)) == 2
