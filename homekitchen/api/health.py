"""Health check endpoint."""
import logging
from fastapi import APIRouter, Depends, Request

from homekitchen.core.dependencies import get_menu_repository
from homekitchen.services.menu.repository import MenuRepository

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(
    request: Request,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Health check endpoint, also reports how many items can be ordered."""
    logger.debug(
        f"[HEALTH] Health check requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    available = await menu_repository.get_available_items()
    return {"status": "healthy", "available_items": len(available)}
