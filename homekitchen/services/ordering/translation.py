"""Tagalog to English normalization for pasted orders."""
import re
from types import MappingProxyType
from typing import Mapping, Optional


# Common Tagalog food and number words, mapped to the English used on the menu
DEFAULT_TERMS: Mapping[str, str] = MappingProxyType({
    "baboy": "pork",
    "manok": "chicken",
    "kanin": "rice",
    "karne": "meat",
    "lutuin": "cooked",
    "pritong": "fried",
    "prito": "fried",
    "tsokolate": "chocolate",
    "mani": "peanuts",
    "matamis": "sweet",
    "asim": "sour",
    "maanghang": "spicy",
    "mainit": "hot",
    "malamig": "cold",
    # Numbers
    "isa": "one",
    "dalawa": "two",
    "tatlo": "three",
    "apat": "four",
    "lima": "five",
    "anim": "six",
    "pito": "seven",
    "walo": "eight",
    "siyam": "nine",
    "sampu": "ten",
    # Menu words
    "liempo": "belly",
    "costillas": "ribs",
    "saging": "banana",
    "itlog": "egg",
    "pagkain": "food",
    "ulam": "dish",
    "panghimagas": "dessert",
})


class BilingualNormalizer:
    """Rewrites known Tagalog words into English, whole words only."""

    def __init__(self, terms: Optional[Mapping[str, str]] = None):
        if terms is None:
            terms = DEFAULT_TERMS
        self.terms: Mapping[str, str] = MappingProxyType(
            {word.lower(): english for word, english in terms.items()}
        )
        self._pattern: Optional[re.Pattern] = None
        if self.terms:
            # Longest first so multi-word terms win over their parts
            words = sorted(self.terms, key=len, reverse=True)
            self._pattern = re.compile(
                r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b",
                re.IGNORECASE,
            )

    def normalize(self, text: str) -> str:
        """Replace every known term in ``text``; other text is left as is."""
        if self._pattern is None:
            return text
        return self._pattern.sub(lambda m: self.terms[m.group(0).lower()], text)


default_normalizer = BilingualNormalizer()


def normalize(text: str) -> str:
    """Normalize ``text`` with the built-in term table."""
    return default_normalizer.normalize(text)
