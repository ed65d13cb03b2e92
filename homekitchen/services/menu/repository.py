"""Menu repository."""
from typing import List, Optional
from homekitchen.services.menu.base import Menu, MenuItem, MenuProvider


class MenuRepository:
    """Repository for menu operations."""

    def __init__(self, provider: MenuProvider):
        self.provider = provider

    async def get_menu(self) -> Menu:
        """Get the full menu."""
        return await self.provider.get_menu()

    async def get_item_by_id(self, item_id: str) -> Optional[MenuItem]:
        """Get item by id."""
        return await self.provider.get_item_by_id(item_id)

    async def get_available_items(self) -> List[MenuItem]:
        """Items on today's menu that still have stock left."""
        menu = await self.get_menu()
        return [
            item for item in menu.items
            if item.is_available and item.remaining_stock > 0
        ]

    async def get_menu_text(self) -> str:
        """Get menu as formatted text for the daily menu post."""
        menu = await self.get_menu()
        lines = ["Menu:"]
        for category in menu.categories:
            lines.append(f"\n{category.title()}:")
            for item in menu.items:
                if item.category == category and item.is_available:
                    stock_str = f" ({item.remaining_stock} left)" if item.remaining_stock else " (sold out)"
                    desc_str = f" - {item.description}" if item.description else ""
                    lines.append(f"  - {item.name} AED {item.price:.2f}{stock_str}{desc_str}")
        return "\n".join(lines)
