from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from adapters.sqlite_storage import SQLiteRecipeStore
from core.errors import RecipeNotFound
from core.models import Recipe, SearchOptions


@pytest.fixture
def store(tmp_path) -> SQLiteRecipeStore:
    store = SQLiteRecipeStore(str(tmp_path / "data" / "recipes.db"))
    store.init_db()
    return store


def _recipe(name: str = "Soup") -> Recipe:
    return Recipe(
        name=name,
        photo_url=f"https://example.com/{name.lower()}.jpg",
        description="Tasty",
        instructions="Boil.",
    )


def test_create_assigns_id_and_created_at(store) -> None:
    recipe_id = store.create(_recipe())

    saved = store.get_by_id(recipe_id)

    assert saved.id == recipe_id
    assert saved.name == "Soup"
    assert saved.photo_url == "https://example.com/soup.jpg"
    assert saved.description == "Tasty"
    assert saved.instructions == "Boil."
    assert saved.created_at is not None
    assert saved.created_at.tzinfo is not None


def test_get_random_on_empty_store_raises_not_found(store) -> None:
    with pytest.raises(RecipeNotFound):
        store.get_random()


def test_get_random_returns_a_stored_recipe(store) -> None:
    ids = {store.create(_recipe(name)) for name in ("Soup", "Stew", "Pilav")}

    for _ in range(10):
        assert store.get_random().id in ids


def test_get_by_id_missing_raises_not_found(store) -> None:
    with pytest.raises(RecipeNotFound):
        store.get_by_id(999)


def test_get_all_respects_limit(store) -> None:
    for name in ("Soup", "Stew", "Pilav"):
        store.create(_recipe(name))

    assert [r.name for r in store.get_all(2)] == ["Soup", "Stew"]


def test_search_filters(store) -> None:
    soup_id = store.create(_recipe("Soup"))
    store.create(_recipe("Stew"))
    now = datetime.now(timezone.utc)

    assert [r.id for r in store.search(SearchOptions(name="Soup"))] == [soup_id]
    assert [r.name for r in store.search(SearchOptions(id=soup_id))] == ["Soup"]
    assert len(store.search(SearchOptions())) == 2
    assert len(store.search(SearchOptions(created_after=now - timedelta(hours=1)))) == 2
    assert store.search(SearchOptions(created_before=now - timedelta(hours=1))) == []


def test_delete(store) -> None:
    recipe_id = store.create(_recipe())

    store.delete(recipe_id)

    with pytest.raises(RecipeNotFound):
        store.get_by_id(recipe_id)
    with pytest.raises(RecipeNotFound):
        store.delete(recipe_id)
