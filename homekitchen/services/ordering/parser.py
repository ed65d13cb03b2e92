"""Order parsing service."""
import logging
import re
from typing import List, Optional, Sequence

from homekitchen.services.menu.base import MenuItem
from homekitchen.services.ordering.customer_info import extract_customer_info
from homekitchen.services.ordering.matcher import DEFAULT_THRESHOLD, check_menu, find_matches
from homekitchen.services.ordering.models import (
    Confidence,
    ParsedCustomerInfo,
    ParsedLineItem,
    ParsedOrderResult,
)
from homekitchen.services.ordering.quantity import extract_quantity, strip_quantity
from homekitchen.services.ordering.translation import BilingualNormalizer, default_normalizer


logger = logging.getLogger(__name__)

MAX_ALTERNATIVES = 3
MIN_SEARCH_LENGTH = 2


def split_lines(text: str) -> List[str]:
    """Trimmed, non-empty lines of ``text``."""
    return [line.strip() for line in text.splitlines() if line.strip()]


class OrderParser:
    """Service for turning a pasted message into a structured order."""

    def __init__(
        self,
        normalizer: Optional[BilingualNormalizer] = None,
        threshold: int = DEFAULT_THRESHOLD,
        max_alternatives: int = MAX_ALTERNATIVES,
    ):
        self.normalizer = normalizer or default_normalizer
        self.threshold = threshold
        self.max_alternatives = max_alternatives

    @staticmethod
    def is_customer_line(index: int, line: str, customer_info: ParsedCustomerInfo) -> bool:
        """
        Check whether a line was already used for customer details.

        The name is only looked for on the first line. Phone and unit use
        plain substring checks, so a line that merely contains the unit
        number is skipped as well. Phones are compared without spaces.
        """
        if index == 0 and customer_info.name and customer_info.name in line:
            return True
        if customer_info.phone and customer_info.phone in re.sub(r"\s", "", line):
            return True
        if customer_info.unit_number and customer_info.unit_number in line:
            return True
        return False

    def parse_line(self, line: str, available_menu: Sequence[MenuItem]) -> Optional[ParsedLineItem]:
        """
        Parse one order line.

        Returns None when the line has too little text left to search for
        once the quantity is removed. Lines with no match are still
        returned, with confidence ``none``, for the reviewer to resolve.
        """
        normalized = self.normalizer.normalize(line)
        quantity = extract_quantity(normalized)
        search_text = strip_quantity(normalized)

        if len(search_text) < MIN_SEARCH_LENGTH:
            logger.debug(f"[PARSE] Skipping line without item text: '{line}'")
            return None

        matches = find_matches(search_text, available_menu, self.threshold)
        if not matches:
            logger.debug(f"[PARSE] No menu match for '{search_text}' (qty {quantity})")
            return ParsedLineItem(
                raw_line=line,
                quantity=quantity,
                match_candidates=[],
                confidence=Confidence.NONE,
            )

        top = matches[: self.max_alternatives]
        logger.debug(
            f"[PARSE] '{search_text}' -> {top[0].menu_item.name} "
            f"(qty {quantity}, score {top[0].score}, {top[0].confidence})"
        )
        return ParsedLineItem(
            raw_line=line,
            quantity=quantity,
            match_candidates=top,
            confidence=top[0].confidence,
            selected_match=top[0],
        )

    def parse(self, text: str, available_menu: Sequence[MenuItem]) -> ParsedOrderResult:
        """
        Parse a pasted order against the orderable menu.

        Args:
            text: Message as pasted from the chat app
            available_menu: Items the caller considers orderable

        Returns:
            ParsedOrderResult with customer details and one entry per order line
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a string, got {type(text).__name__}")
        check_menu(available_menu)

        customer_info = extract_customer_info(text)
        items: List[ParsedLineItem] = []

        for index, line in enumerate(split_lines(text)):
            if self.is_customer_line(index, line, customer_info):
                continue

            item = self.parse_line(line, available_menu)
            if item is not None:
                items.append(item)

        unresolved = sum(1 for item in items if item.confidence == Confidence.NONE)
        logger.debug(
            f"[PARSE] Parsed {len(items)} lines ({unresolved} unresolved), "
            f"customer confidence {customer_info.confidence}"
        )

        return ParsedOrderResult(
            items=items,
            customer_info=customer_info,
            raw_text=text,
        )


def parse_order(
    text: str,
    available_menu: Sequence[MenuItem],
    threshold: int = DEFAULT_THRESHOLD,
) -> ParsedOrderResult:
    """Parse ``text`` with the built-in term table."""
    return OrderParser(threshold=threshold).parse(text, available_menu)
