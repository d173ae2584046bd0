"""
Pytest configuration and shared fixtures.
"""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from dining_review_api.app.core.config import settings
from dining_review_api.app.core.db import get_connection, init_db
from dining_review_api.app.main import app
from dining_review_api.app.repositories.restaurant_repository import RestaurantStore
from dining_review_api.app.schemas.restaurant import RestaurantRead


class InMemoryRestaurantStore(RestaurantStore):
    """List-backed store that records every save."""

    def __init__(self, restaurants: Optional[List[RestaurantRead]] = None):
        self.rows = {}
        self.saves = []
        self.exists_calls = []
        for restaurant in restaurants or []:
            self.rows[restaurant.id] = restaurant

    def find_by_id(self, restaurant_id):
        return self.rows.get(restaurant_id)

    def exists_by_name_and_zip_code(self, name, zip_code):
        self.exists_calls.append((name, zip_code))
        return any(r.name == name and r.zip_code == zip_code for r in self.rows.values())

    def find_by_name(self, name):
        matches = sorted((r for r in self.rows.values() if r.name == name), key=lambda r: r.id)
        return matches[0] if matches else None

    def _sorted(self, rows, ascending):
        return sorted(rows, key=lambda r: (r.name, r.id), reverse=not ascending)

    def list_by_country(self, country, ascending):
        return self._sorted([r for r in self.rows.values() if r.country == country], ascending)

    def list_by_city(self, city, ascending):
        return self._sorted([r for r in self.rows.values() if r.city == city], ascending)

    def list_by_zip_code(self, zip_code, ascending):
        return self._sorted([r for r in self.rows.values() if r.zip_code == zip_code], ascending)

    def list_with_any_score_by_zip_code(self, zip_code):
        return [
            r
            for r in self.rows.values()
            if r.zip_code == zip_code
            and (
                r.average_score_egg is not None
                or r.average_score_dairy is not None
                or r.average_score_peanut is not None
            )
        ]

    def list_all(self):
        return list(self.rows.values())

    def save(self, restaurant):
        if restaurant.id is None:
            restaurant = restaurant.model_copy(update={"id": max(self.rows, default=0) + 1})
        self.rows[restaurant.id] = restaurant
        self.saves.append(restaurant)
        return restaurant


@pytest.fixture
def memory_store() -> InMemoryRestaurantStore:
    return InMemoryRestaurantStore(
        [
            RestaurantRead(
                id=1,
                name="A",
                zip_code="1",
                country="US",
                city="Springfield",
                average_score_egg=4.5,
                overall_score=4.0,
            ),
        ]
    )


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file and apply migrations."""
    db_file = tmp_path / "dining_review_test.db"
    monkeypatch.setattr(settings, "database_url", str(db_file))
    init_db()
    return db_file


@pytest.fixture
def client(database):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def set_scores(database):
    """Write score columns directly, as the external aggregation job would."""

    def _set_scores(restaurant_id, egg=None, dairy=None, peanut=None, overall=None):
        conn = get_connection()
        try:
            conn.execute(
                """
                UPDATE restaurants
                SET average_score_egg = ?, average_score_dairy = ?,
                    average_score_peanut = ?, overall_score = ?
                WHERE id = ?
                """,
                (egg, dairy, peanut, overall, restaurant_id),
            )
            conn.commit()
        finally:
            conn.close()

    return _set_scores
