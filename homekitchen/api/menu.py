"""Menu API endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from homekitchen.core.dependencies import get_menu_repository
from homekitchen.services.menu.base import Menu, MenuItem
from homekitchen.services.menu.repository import MenuRepository


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/menu", response_model=Menu)
async def get_menu(
    request: Request,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Get the full menu."""
    logger.info(
        f"[MENU] Request received - Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        menu = await menu_repository.get_menu()
        logger.info(f"[MENU] Menu loaded - {len(menu.items)} items, {len(menu.categories)} categories")
        return menu

    except Exception as e:
        logger.error(
            f"[MENU] Error fetching menu - Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error fetching menu: {str(e)}")


@router.get("/api/menu/available", response_model=List[MenuItem])
async def get_available_menu(
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Get the items that can still be ordered today."""
    try:
        items = await menu_repository.get_available_items()
        logger.info(f"[MENU] {len(items)} items available")
        return items

    except Exception as e:
        logger.error(
            f"[MENU] Error fetching available items - Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error fetching available items: {str(e)}")


@router.get("/api/menu/text", response_class=PlainTextResponse)
async def get_menu_text(
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Get today's menu as text, ready to post in the customer chat."""
    try:
        return await menu_repository.get_menu_text()

    except Exception as e:
        logger.error(
            f"[MENU] Error rendering menu text - Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error rendering menu text: {str(e)}")
