"""Menu provider interface."""
from abc import ABC, abstractmethod
from typing import List, Optional
from pydantic import BaseModel, Field


class MenuItem(BaseModel):
    """Menu item model."""

    id: str
    name: str
    description: Optional[str] = None
    tags: List[str] = []
    category: str = "mains"
    price: float = 0.0
    remaining_stock: int = Field(default=0, ge=0)  # Left from today's daily limit
    is_available: bool = True  # Published on today's menu


class Menu(BaseModel):
    """Menu model."""

    items: List[MenuItem]
    categories: List[str] = []


class MenuProvider(ABC):
    """Abstract base class for menu providers."""

    @abstractmethod
    async def get_menu(self) -> Menu:
        """Get the full menu."""
        pass

    @abstractmethod
    async def get_item_by_id(self, item_id: str) -> Optional[MenuItem]:
        """Get a menu item by id."""
        pass
