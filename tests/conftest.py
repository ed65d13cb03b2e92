"""Shared test fixtures and configuration."""
import pytest
import yaml
from fastapi.testclient import TestClient

from homekitchen.main import app
from homekitchen.core.dependencies import get_menu_repository
from homekitchen.services.menu.base import MenuItem
from homekitchen.services.menu.repository import MenuRepository
from homekitchen.services.menu.in_memory_menu import InMemoryMenuProvider


TEST_MENU = {
    "items": [
        {
            "id": "honey-pork-ribs",
            "name": "Honey Pork Ribs",
            "description": "Slow cooked ribs with honey glaze",
            "tags": ["bbq"],
            "category": "mains",
            "price": 35.0,
            "remaining_stock": 5,
        },
        {
            "id": "siomai",
            "name": "Siomai (10pcs)",
            "description": "Steamed pork dumplings",
            "tags": ["dumplings"],
            "category": "snacks",
            "price": 20.0,
            "remaining_stock": 10,
        },
        {
            "id": "turon",
            "name": "Turon",
            "description": "Fried banana roll",
            "tags": ["dessert"],
            "category": "desserts",
            "price": 10.0,
            "remaining_stock": 3,
        },
        {
            "id": "leche-flan",
            "name": "Leche Flan",
            "description": "Egg custard with caramel",
            "tags": ["dessert"],
            "category": "desserts",
            "price": 15.0,
            "remaining_stock": 0,
        },
        {
            "id": "chicken-adobo",
            "name": "Chicken Adobo",
            "description": "Chicken braised in soy and vinegar",
            "category": "mains",
            "price": 25.0,
            "remaining_stock": 8,
            "is_available": False,
        },
    ],
    "categories": ["mains", "snacks", "desserts"],
}


@pytest.fixture
def sample_menu():
    """Orderable items as the caller passes them to the parser."""
    return [
        MenuItem(**item) for item in TEST_MENU["items"][:3]
    ]


@pytest.fixture
def test_menu_path(tmp_path):
    """Write the test menu YAML file and return its path."""
    path = tmp_path / "test_menu.yaml"
    with open(path, "w") as f:
        yaml.safe_dump(TEST_MENU, f, default_flow_style=False, sort_keys=False)
    return path


@pytest.fixture
def test_menu_repository(test_menu_path):
    """Create menu repository with test data."""
    provider = InMemoryMenuProvider(menu_file=str(test_menu_path))
    return MenuRepository(provider)


@pytest.fixture
def override_get_menu_repository(test_menu_repository):
    """Override get_menu_repository dependency with test menu."""
    def _override_get_menu_repository():
        return test_menu_repository
    return _override_get_menu_repository


@pytest.fixture
def test_client(override_get_menu_repository):
    """Create FastAPI test client with overrides."""
    app.dependency_overrides[get_menu_repository] = override_get_menu_repository

    client = TestClient(app)

    yield client

    app.dependency_overrides.clear()
