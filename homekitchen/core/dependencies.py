"""FastAPI dependencies."""
from functools import lru_cache

from fastapi import Depends

from homekitchen.core.config import settings
from homekitchen.services.menu.repository import MenuRepository
from homekitchen.services.menu.in_memory_menu import InMemoryMenuProvider
from homekitchen.services.ordering.parser import OrderParser
from homekitchen.services.ordering.validator import OrderValidator


@lru_cache
def get_menu_repository() -> MenuRepository:
    """Get menu repository instance."""
    return MenuRepository(provider=InMemoryMenuProvider(menu_file=settings.menu_file))


def get_order_parser() -> OrderParser:
    """Get order parser configured from settings."""
    return OrderParser(
        threshold=settings.match_threshold,
        max_alternatives=settings.max_alternatives,
    )


def get_order_validator(
    menu_repository: MenuRepository = Depends(get_menu_repository),
    parser: OrderParser = Depends(get_order_parser),
) -> OrderValidator:
    """Get order validator sharing the parser's term table."""
    return OrderValidator(menu_repository, normalizer=parser.normalizer)
