"""
Storage access for restaurants.

``RestaurantStore`` lists the lookups and list queries the service
layer relies on.  Each query is an explicit method; nothing is derived
from method names.  ``SQLiteRestaurantRepository`` implements the
interface with parameterized SQL against the ``restaurants`` table and
opens a fresh connection per call.

Score columns are never written here: inserts and updates only touch
``name``, ``zip_code``, ``country`` and ``city``.
"""

import logging
import sqlite3
from typing import List, Optional

from dining_review_api.app.core.db import get_connection
from dining_review_api.app.schemas.restaurant import RestaurantRead

logger = logging.getLogger(__name__)

_COLUMNS = (
    "id, name, zip_code, country, city, overall_score, "
    "average_score_egg, average_score_dairy, average_score_peanut"
)


class RestaurantStore:
    """Interface of the persistence collaborator used by the services."""

    def find_by_id(self, restaurant_id: int) -> Optional[RestaurantRead]:
        raise NotImplementedError

    def exists_by_name_and_zip_code(self, name: Optional[str], zip_code: Optional[str]) -> bool:
        raise NotImplementedError

    def find_by_name(self, name: str) -> Optional[RestaurantRead]:
        raise NotImplementedError

    def list_by_country(self, country: str, ascending: bool) -> List[RestaurantRead]:
        raise NotImplementedError

    def list_by_city(self, city: str, ascending: bool) -> List[RestaurantRead]:
        raise NotImplementedError

    def list_by_zip_code(self, zip_code: str, ascending: bool) -> List[RestaurantRead]:
        raise NotImplementedError

    def list_with_any_score_by_zip_code(self, zip_code: str) -> List[RestaurantRead]:
        raise NotImplementedError

    def list_all(self) -> List[RestaurantRead]:
        raise NotImplementedError

    def save(self, restaurant: RestaurantRead) -> RestaurantRead:
        """Insert ``restaurant`` when it has no id, update it otherwise."""
        raise NotImplementedError


class SQLiteRestaurantRepository(RestaurantStore):
    """``RestaurantStore`` backed by the SQLite database from ``core.db``."""

    def find_by_id(self, restaurant_id: int) -> Optional[RestaurantRead]:
        return self._fetch_one(
            f"SELECT {_COLUMNS} FROM restaurants WHERE id = ?", (restaurant_id,)
        )

    def exists_by_name_and_zip_code(self, name: Optional[str], zip_code: Optional[str]) -> bool:
        # ``IS`` compares NULLs as equal, so a missing name still matches
        # rows whose name is NULL.
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT 1 FROM restaurants WHERE name IS ? AND zip_code IS ? LIMIT 1",
                (name, zip_code),
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def find_by_name(self, name: str) -> Optional[RestaurantRead]:
        return self._fetch_one(
            f"SELECT {_COLUMNS} FROM restaurants WHERE name = ? ORDER BY id LIMIT 1",
            (name,),
        )

    def list_by_country(self, country: str, ascending: bool) -> List[RestaurantRead]:
        return self._fetch_all(
            f"SELECT {_COLUMNS} FROM restaurants WHERE country = ? "
            f"ORDER BY {self._name_order(ascending)}",
            (country,),
        )

    def list_by_city(self, city: str, ascending: bool) -> List[RestaurantRead]:
        return self._fetch_all(
            f"SELECT {_COLUMNS} FROM restaurants WHERE city = ? "
            f"ORDER BY {self._name_order(ascending)}",
            (city,),
        )

    def list_by_zip_code(self, zip_code: str, ascending: bool) -> List[RestaurantRead]:
        return self._fetch_all(
            f"SELECT {_COLUMNS} FROM restaurants WHERE zip_code = ? "
            f"ORDER BY {self._name_order(ascending)}",
            (zip_code,),
        )

    def list_with_any_score_by_zip_code(self, zip_code: str) -> List[RestaurantRead]:
        return self._fetch_all(
            f"""
            SELECT {_COLUMNS} FROM restaurants
            WHERE zip_code = ?
              AND (average_score_egg IS NOT NULL
                   OR average_score_dairy IS NOT NULL
                   OR average_score_peanut IS NOT NULL)
            ORDER BY zip_code DESC, id ASC
            """,
            (zip_code,),
        )

    def list_all(self) -> List[RestaurantRead]:
        return self._fetch_all(f"SELECT {_COLUMNS} FROM restaurants", ())

    def save(self, restaurant: RestaurantRead) -> RestaurantRead:
        conn = get_connection()
        try:
            cursor = conn.cursor()
            if restaurant.id is None:
                cursor.execute(
                    """
                    INSERT INTO restaurants (name, zip_code, country, city)
                    VALUES (?, ?, ?, ?)
                    """,
                    (restaurant.name, restaurant.zip_code, restaurant.country, restaurant.city),
                )
                restaurant_id = cursor.lastrowid
            else:
                cursor.execute(
                    """
                    UPDATE restaurants
                    SET name = ?, zip_code = ?, country = ?, city = ?
                    WHERE id = ?
                    """,
                    (
                        restaurant.name,
                        restaurant.zip_code,
                        restaurant.country,
                        restaurant.city,
                        restaurant.id,
                    ),
                )
                restaurant_id = restaurant.id
            conn.commit()
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM restaurants WHERE id = ?", (restaurant_id,)
            ).fetchone()
            return self._row_to_restaurant(row)
        except sqlite3.Error as e:
            conn.rollback()
            logger.error("Failed to save restaurant %s: %s", restaurant.id, e)
            raise
        finally:
            conn.close()

    @staticmethod
    def _name_order(ascending: bool) -> str:
        # Ties on name are broken by id in the same direction so the
        # descending list is exactly the ascending one reversed.
        return "name ASC, id ASC" if ascending else "name DESC, id DESC"

    def _fetch_one(self, query: str, params: tuple) -> Optional[RestaurantRead]:
        conn = get_connection()
        try:
            row = conn.execute(query, params).fetchone()
            if not row:
                return None
            return self._row_to_restaurant(row)
        finally:
            conn.close()

    def _fetch_all(self, query: str, params: tuple) -> List[RestaurantRead]:
        conn = get_connection()
        try:
            rows = conn.execute(query, params).fetchall()
            return [self._row_to_restaurant(row) for row in rows]
        finally:
            conn.close()

    @staticmethod
    def _row_to_restaurant(row: sqlite3.Row) -> RestaurantRead:
        """Convert a database row to a RestaurantRead schema instance."""
        return RestaurantRead(
            id=row["id"],
            name=row["name"],
            zip_code=row["zip_code"],
            country=row["country"],
            city=row["city"],
            overall_score=row["overall_score"],
            average_score_egg=row["average_score_egg"],
            average_score_dairy=row["average_score_dairy"],
            average_score_peanut=row["average_score_peanut"],
        )
