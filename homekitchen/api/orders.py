"""Order intake API endpoints."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from homekitchen.core.dependencies import (
    get_menu_repository,
    get_order_parser,
    get_order_validator,
)
from homekitchen.services.menu.repository import MenuRepository
from homekitchen.services.ordering.models import OrderDraft, ParsedOrderResult
from homekitchen.services.ordering.parser import OrderParser
from homekitchen.services.ordering.validator import InsufficientStockError, OrderValidator


router = APIRouter()
logger = logging.getLogger(__name__)


class ParseRequest(BaseModel):
    """Pasted order text."""
    text: str = ""
    threshold: Optional[int] = Field(default=None, ge=0, le=100)


class SuggestionRequest(BaseModel):
    """Unresolved order line."""
    line: str
    limit: int = Field(default=3, ge=1, le=10)


class SuggestionResponse(BaseModel):
    """Menu items the operator can pick from."""
    line: str
    suggestions: List[str] = []


@router.post("/api/orders/parse", response_model=ParsedOrderResult)
async def parse_order(
    request: Request,
    body: ParseRequest,
    parser: OrderParser = Depends(get_order_parser),
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Parse a pasted chat message into a structured order."""
    logger.info(
        f"[PARSE] Request received - {len(body.text)} chars, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        if body.threshold is not None:
            parser = OrderParser(
                normalizer=parser.normalizer,
                threshold=body.threshold,
                max_alternatives=parser.max_alternatives,
            )
        available = await menu_repository.get_available_items()
        result = parser.parse(body.text, available)
        logger.info(
            f"[PARSE] Parsed {len(result.items)} lines against {len(available)} items - "
            f"customer: {result.customer_info.name or 'unknown'}"
        )
        return result

    except Exception as e:
        logger.error(
            f"[PARSE] Error parsing order - Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error parsing order: {str(e)}")


@router.post("/api/orders/draft", response_model=OrderDraft)
async def create_draft(
    result: ParsedOrderResult,
    validator: OrderValidator = Depends(get_order_validator),
):
    """Turn a reviewed parse result into an order draft."""
    logger.info(f"[DRAFT] Request received - {len(result.items)} reviewed lines")

    try:
        draft = await validator.build_draft(result)
        logger.info(
            f"[DRAFT] Draft ready - {len(draft.lines)} lines, total {draft.total:.2f}, "
            f"{len(draft.unresolved)} unresolved"
        )
        return draft

    except InsufficientStockError as e:
        raise HTTPException(status_code=409, detail=str(e))

    except Exception as e:
        logger.error(
            f"[DRAFT] Error building draft - Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error building draft: {str(e)}")


@router.post("/api/orders/suggestions", response_model=SuggestionResponse)
async def suggest_items(
    body: SuggestionRequest,
    validator: OrderValidator = Depends(get_order_validator),
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Suggest menu items for a line the parser could not match."""
    available = await menu_repository.get_available_items()
    suggestions = validator.suggest_alternatives(body.line, available, limit=body.limit)
    logger.info(f"[SUGGEST] {len(suggestions)} suggestions for '{body.line}'")
    return SuggestionResponse(line=body.line, suggestions=suggestions)
