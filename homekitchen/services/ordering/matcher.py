"""Fuzzy matching of order phrases against the menu."""
import logging
from collections.abc import Sequence as SequenceABC
from typing import Iterator, List, Optional, Sequence, Tuple

from homekitchen.services.menu.base import MenuItem
from homekitchen.services.ordering.models import Confidence, MatchCandidate, MatchField
from homekitchen.services.ordering.similarity import similarity


logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 50
HIGH_CONFIDENCE_SCORE = 85
MEDIUM_CONFIDENCE_SCORE = 70
MIN_QUERY_LENGTH = 2
MIN_WORD_LENGTH = 2


def confidence_for_score(score: int) -> Confidence:
    """Map a similarity score to its confidence bucket."""
    if score >= HIGH_CONFIDENCE_SCORE:
        return Confidence.HIGH
    if score >= MEDIUM_CONFIDENCE_SCORE:
        return Confidence.MEDIUM
    return Confidence.LOW


def check_menu(menu: Sequence[MenuItem]) -> None:
    """Reject anything that is not a sequence of menu items."""
    if isinstance(menu, (str, bytes)) or not isinstance(menu, SequenceABC):
        raise TypeError(f"menu must be a sequence of MenuItem, got {type(menu).__name__}")
    for item in menu:
        if not isinstance(item, MenuItem):
            raise TypeError(f"menu must contain MenuItem objects, got {type(item).__name__}")


def _words(text: str) -> Iterator[str]:
    for word in text.split():
        if len(word) >= MIN_WORD_LENGTH:
            yield word


def match_fields(item: MenuItem) -> Iterator[Tuple[MatchField, str]]:
    """
    Texts of a menu item that a phrase is compared with, in order.

    Full name, then each name word, then each description word, then
    each tag. Earlier fields win ties.
    """
    yield MatchField.NAME, item.name
    for word in _words(item.name):
        yield MatchField.NAME, word
    if item.description:
        for word in _words(item.description):
            yield MatchField.DESCRIPTION, word
    for tag in item.tags:
        yield MatchField.TAG, tag


def best_match(query: str, item: MenuItem) -> Optional[MatchCandidate]:
    """Best scoring field of ``item`` for an already normalized query."""
    best: Optional[MatchCandidate] = None
    best_score = 0

    for field, text in match_fields(item):
        score = similarity(query, text.lower())
        if score > best_score:
            best_score = score
            best = MatchCandidate(
                menu_item=item,
                score=score,
                confidence=confidence_for_score(score),
                matched_on=field,
                matched_text=text,
            )

    return best


def find_matches(
    query: str,
    menu: Sequence[MenuItem],
    threshold: int = DEFAULT_THRESHOLD,
) -> List[MatchCandidate]:
    """
    Rank menu items against a search phrase.

    Each item contributes at most one candidate, its best field. Items
    scoring below ``threshold`` are dropped. Results are sorted best
    first; equal scores keep menu order.
    """
    check_menu(menu)

    normalized_query = query.lower().strip()
    if len(normalized_query) < MIN_QUERY_LENGTH:
        return []

    results: List[MatchCandidate] = []
    for item in menu:
        candidate = best_match(normalized_query, item)
        if candidate is not None and candidate.score >= threshold:
            results.append(candidate)

    results.sort(key=lambda c: c.score, reverse=True)
    logger.debug(
        f"[MATCH] '{normalized_query}' - {len(results)} candidates"
        + (f", best '{results[0].menu_item.name}' ({results[0].score})" if results else "")
    )
    return results
