"""SQLite storage adapter.

Implements the core RecipeStorePort using a simple SQLite database.
"""

from __future__ import annotations

import os
import sqlite3
from datetime import datetime, timezone
from typing import Any, List

from core.errors import RecipeNotFound, StoreError
from core.models import Recipe, SearchOptions

_SELECT_RECIPES = """
    SELECT id, name, photo_url, instructions, description, created_at
    FROM recipes
"""


def _recipe_from_row(row: sqlite3.Row) -> Recipe:
    created_at = row["created_at"]
    return Recipe(
        id=int(row["id"]),
        name=row["name"] or "",
        photo_url=row["photo_url"] or "",
        instructions=row["instructions"] or "",
        description=row["description"] or "",
        created_at=datetime.fromisoformat(created_at) if created_at else None,
    )


class SQLiteRecipeStore:
    """Thin SQLite wrapper that satisfies the RecipeStorePort contract."""

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        """Create the recipes table if it does not exist."""

        directory = os.path.dirname(self._db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with self._connect() as conn:
            # recipes is the only table; ids and created_at are owned here,
            # never by the core.
            # Fields:
            # - id: auto-increment primary key
            # - name: recipe name shown as the photo caption
            # - photo_url: absolute URL sent with sendPhoto
            # - instructions/description: optional free text, '' when absent
            # - created_at: UTC ISO-8601 timestamp of creation
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS recipes (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    photo_url TEXT NOT NULL,
                    instructions TEXT,
                    description TEXT,
                    created_at TIMESTAMP NOT NULL
                )
                """
            )

    def create(self, recipe: Recipe) -> int:
        """Insert a recipe and return its new id."""

        created_at = datetime.now(timezone.utc)
        try:
            with self._connect() as conn:
                cur = conn.execute(
                    """
                    INSERT INTO recipes (name, photo_url, instructions, description, created_at)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (
                        recipe.name,
                        recipe.photo_url,
                        recipe.instructions,
                        recipe.description,
                        created_at.isoformat(),
                    ),
                )
                return int(cur.lastrowid)
        except sqlite3.Error as e:
            raise StoreError(f"insert recipe: {e}") from e

    def get_by_id(self, recipe_id: int) -> Recipe:
        rows = self._query(f"{_SELECT_RECIPES} WHERE id = ?", (recipe_id,))
        if not rows:
            raise RecipeNotFound(f"recipe {recipe_id} not found")
        return rows[0]

    def get_random(self) -> Recipe:
        """Return one recipe picked uniformly at random."""

        rows = self._query(f"{_SELECT_RECIPES} ORDER BY RANDOM() LIMIT 1", ())
        if not rows:
            raise RecipeNotFound("no recipes stored")
        return rows[0]

    def search(self, options: SearchOptions) -> List[Recipe]:
        """Return recipes matching every filter set in ``options``."""

        clauses: list[str] = []
        params: list[Any] = []
        if options.id is not None:
            clauses.append("id = ?")
            params.append(options.id)
        if options.name:
            clauses.append("name = ?")
            params.append(options.name)
        if options.created_after is not None:
            clauses.append("created_at > ?")
            params.append(options.created_after.astimezone(timezone.utc).isoformat())
        if options.created_before is not None:
            clauses.append("created_at < ?")
            params.append(options.created_before.astimezone(timezone.utc).isoformat())

        query = _SELECT_RECIPES
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        return self._query(query + " ORDER BY id", tuple(params))

    def get_all(self, limit: int) -> List[Recipe]:
        return self._query(f"{_SELECT_RECIPES} ORDER BY id LIMIT ?", (limit,))

    def delete(self, recipe_id: int) -> None:
        try:
            with self._connect() as conn:
                cur = conn.execute("DELETE FROM recipes WHERE id = ?", (recipe_id,))
        except sqlite3.Error as e:
            raise StoreError(f"delete recipe: {e}") from e
        if cur.rowcount == 0:
            raise RecipeNotFound(f"recipe {recipe_id} not found")

    def _query(self, query: str, params: tuple) -> List[Recipe]:
        try:
            with self._connect() as conn:
                rows = conn.execute(query, params).fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"query recipes: {e}") from e
        return [_recipe_from_row(row) for row in rows]
