import pytest
from fastapi.testclient import TestClient

from menu_catalog_api.app.core.config import Settings
from menu_catalog_api.app.main import create_app
from menu_catalog_api.app.services.menu_data import DEFAULT_MENU
from menu_catalog_api.app.services.menu_service import CatalogStore


TACO = {
    "name": "Taco",
    "description": "Spicy beef taco",
    "price": 5.5,
    "category": "entree",
    "ingredients": ["beef", "tortilla"],
}


@pytest.fixture
def taco() -> dict:
    return dict(TACO, ingredients=list(TACO["ingredients"]))


@pytest.fixture
def store() -> CatalogStore:
    return CatalogStore(DEFAULT_MENU)


@pytest.fixture
def client(store: CatalogStore) -> TestClient:
    app = create_app(Settings(), store=store)
    return TestClient(app)
