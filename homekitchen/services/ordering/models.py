"""Order parsing models."""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

from homekitchen.services.menu.base import MenuItem


class Confidence(str, Enum):
    """Coarse reliability bucket for a match or an extraction."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"  # Only used for line items without candidates

    def __str__(self) -> str:
        """Return the string value of the level."""
        return self.value


class MatchField(str, Enum):
    """Menu item field that produced a match."""

    NAME = "name"
    DESCRIPTION = "description"
    TAG = "tag"

    def __str__(self) -> str:
        """Return the string value of the field."""
        return self.value


class MatchCandidate(BaseModel):
    """A menu item scored against a search phrase."""

    menu_item: MenuItem
    score: int = Field(ge=0, le=100)
    confidence: Confidence
    matched_on: MatchField
    matched_text: str


class ParsedLineItem(BaseModel):
    """One order line with its quantity and ranked menu candidates."""

    raw_line: str
    quantity: int = Field(default=1, ge=1)
    match_candidates: List[MatchCandidate] = []
    confidence: Confidence = Confidence.NONE
    selected_match: Optional[MatchCandidate] = None  # Reviewer may overwrite


class ParsedCustomerInfo(BaseModel):
    """Customer details found in a pasted message."""

    name: Optional[str] = None
    phone: Optional[str] = None
    unit_number: Optional[str] = None
    building: Optional[str] = None
    floor: Optional[str] = None
    confidence: Confidence = Confidence.LOW


class ParsedOrderResult(BaseModel):
    """Structured result of parsing one pasted order."""

    items: List[ParsedLineItem] = []
    customer_info: ParsedCustomerInfo = Field(default_factory=ParsedCustomerInfo)
    raw_text: str = ""


class OrderDraftLine(BaseModel):
    """Confirmed order line ready for the order store."""

    menu_item_id: str
    name: str
    quantity: int
    unit_price: float

    @property
    def line_total(self) -> float:
        """Price of the line."""
        return self.unit_price * self.quantity


class OrderDraft(BaseModel):
    """Reviewed order handed to the order store."""

    customer: ParsedCustomerInfo
    lines: List[OrderDraftLine] = []
    total: float = 0.0
    warnings: List[str] = []
    unresolved: List[str] = []  # Raw lines the reviewer left without a match
