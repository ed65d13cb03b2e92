"""In-memory menu provider."""
import logging
import yaml
from pathlib import Path
from typing import List, Optional
from homekitchen.services.menu.base import Menu, MenuItem, MenuProvider


logger = logging.getLogger(__name__)


def _default_menu() -> Menu:
    return Menu(
        items=[
            MenuItem(
                id="honey-pork-ribs",
                name="Honey Pork Ribs",
                description="Slow cooked ribs with honey glaze",
                tags=["ribs", "baboy"],
                category="mains",
                price=35.0,
                remaining_stock=10,
            ),
            MenuItem(
                id="siomai",
                name="Siomai (10pcs)",
                description="Steamed pork dumplings",
                tags=["dumplings"],
                category="snacks",
                price=20.0,
                remaining_stock=15,
            ),
            MenuItem(
                id="turon",
                name="Turon",
                description="Fried banana roll with caramel",
                tags=["dessert", "saging"],
                category="desserts",
                price=10.0,
                remaining_stock=12,
            ),
        ],
        categories=["mains", "snacks", "desserts"],
    )


class InMemoryMenuProvider(MenuProvider):
    """In-memory menu provider using YAML configuration."""

    def __init__(self, menu_file: Optional[str] = None):
        """Initialize with optional menu file path."""
        if menu_file is None:
            menu_file = Path(__file__).parent / "data" / "menu.yaml"
        self.menu_file = Path(menu_file)
        self._menu: Optional[Menu] = None

    async def _load_menu(self) -> Menu:
        """Load menu from YAML file."""
        if self._menu is None:
            if not self.menu_file.exists():
                logger.warning(f"[MENU] {self.menu_file} not found, using sample menu")
                self._menu = _default_menu()
            else:
                with open(self.menu_file, "r") as f:
                    data = yaml.safe_load(f) or {}
                items = [MenuItem(**item) for item in data.get("items", [])]
                categories: List[str] = data.get("categories") or []
                if not categories:
                    # Unique, in menu order
                    categories = list(dict.fromkeys(item.category for item in items))
                self._menu = Menu(items=items, categories=categories)
                logger.info(f"[MENU] Loaded {len(items)} items from {self.menu_file}")
        return self._menu

    def reload(self) -> None:
        """Drop the cached menu so the next read goes back to the file."""
        self._menu = None

    async def get_menu(self) -> Menu:
        """Get the full menu."""
        return await self._load_menu()

    async def get_item_by_id(self, item_id: str) -> Optional[MenuItem]:
        """Get a menu item by id."""
        menu = await self._load_menu()
        for item in menu.items:
            if item.id == item_id:
                return item
        return None

