"""Order review and draft building."""
import logging
from typing import Dict, List, Optional, Sequence

from homekitchen.services.menu.base import MenuItem
from homekitchen.services.menu.repository import MenuRepository
from homekitchen.services.ordering.customer_info import is_local_mobile
from homekitchen.services.ordering.matcher import find_matches
from homekitchen.services.ordering.models import (
    Confidence,
    OrderDraft,
    OrderDraftLine,
    ParsedOrderResult,
)
from homekitchen.services.ordering.quantity import strip_quantity
from homekitchen.services.ordering.translation import BilingualNormalizer, default_normalizer


logger = logging.getLogger(__name__)

SUGGESTION_THRESHOLD = 30


class InsufficientStockError(ValueError):
    """Raised when a draft orders more than is left of an item."""

    def __init__(self, item_name: str, requested: int, remaining: int):
        self.item_name = item_name
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Not enough stock for '{item_name}': requested {requested}, {remaining} left"
        )


class OrderValidator:
    """Service for validating reviewed orders."""

    def __init__(
        self,
        menu_repository: MenuRepository,
        normalizer: Optional[BilingualNormalizer] = None,
    ):
        self.menu_repository = menu_repository
        self.normalizer = normalizer or default_normalizer

    async def build_draft(self, result: ParsedOrderResult) -> OrderDraft:
        """
        Turn a reviewed parse result into an order draft.

        Lines selecting the same item are merged. Lines without a
        selection, or whose item is no longer on the menu, are listed as
        unresolved.

        Raises:
            InsufficientStockError: if an item is ordered beyond its stock
        """
        warnings: List[str] = []
        unresolved: List[str] = []
        lines: Dict[str, OrderDraftLine] = {}
        stock: Dict[str, int] = {}

        for parsed in result.items:
            if parsed.selected_match is None:
                unresolved.append(parsed.raw_line)
                continue

            item_id = parsed.selected_match.menu_item.id
            menu_item = await self.menu_repository.get_item_by_id(item_id)
            if menu_item is None:
                warnings.append(f"'{parsed.selected_match.menu_item.name}' is no longer on the menu")
                unresolved.append(parsed.raw_line)
                continue

            if parsed.selected_match.confidence == Confidence.LOW:
                warnings.append(f"Check '{parsed.raw_line}': matched {menu_item.name} with low confidence")

            stock[item_id] = menu_item.remaining_stock
            if item_id in lines:
                lines[item_id].quantity += parsed.quantity
            else:
                lines[item_id] = OrderDraftLine(
                    menu_item_id=item_id,
                    name=menu_item.name,
                    quantity=parsed.quantity,
                    unit_price=menu_item.price,
                )

        for line in lines.values():
            remaining = stock[line.menu_item_id]
            if line.quantity > remaining:
                logger.info(
                    f"[DRAFT] Stock exceeded - {line.name}: requested {line.quantity}, remaining {remaining}"
                )
                raise InsufficientStockError(line.name, line.quantity, remaining)

        customer = result.customer_info
        if not customer.phone:
            warnings.append("No phone number found, treating as walk-in order")
        elif not is_local_mobile(customer.phone):
            warnings.append(f"'{customer.phone}' doesn't look like a local mobile number")

        draft_lines = list(lines.values())
        return OrderDraft(
            customer=customer,
            lines=draft_lines,
            total=sum(line.line_total for line in draft_lines),
            warnings=warnings,
            unresolved=unresolved,
        )

    def suggest_alternatives(
        self, raw_line: str, menu: Sequence[MenuItem], limit: int = 3
    ) -> List[str]:
        """
        Suggest menu items for a line the parser could not match.

        Args:
            raw_line: The unresolved order line
            menu: Items to suggest from, usually the orderable ones
            limit: Maximum number of suggestions

        Returns:
            List of suggested item names
        """
        search_text = strip_quantity(self.normalizer.normalize(raw_line))
        matches = find_matches(search_text, menu, threshold=SUGGESTION_THRESHOLD)
        return [match.menu_item.name for match in matches[:limit]]
