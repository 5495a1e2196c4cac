"""
Term catalog: the browsable listing of stored terms and its filters.
"""

import logging
import re
from typing import List, Optional

from .errors import StoreUnavailable
from .schemas import TermSummary
from .seed_data import STATIC_SUMMARIES
from .store import TermStoreClient

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "Todos"
NON_ALPHA_LETTER = "#"

# Older rows were filed under DevOps before it folded into Infraestrutura
CATEGORY_ALIASES = {"Infraestrutura": {"DevOps"}}

_ALPHA = re.compile(r'^[A-Z]$')


def _sort_key(summary: TermSummary) -> str:
    return (summary.term or "").lower()


class TermCatalog:
    """Listing of every known term, from the store when it has any"""

    def __init__(self, store: Optional[TermStoreClient] = None):
        self.store = store

    async def list_terms(self) -> List[TermSummary]:
        if self.store is not None:
            try:
                terms = await self.store.list_terms()
                if terms:
                    return terms
            except StoreUnavailable as e:
                logger.error(f"Erro ao buscar glossário: {e}")

        return sorted(STATIC_SUMMARIES, key=_sort_key)


def filter_terms(
    terms: List[TermSummary],
    category: str = ALL_CATEGORIES,
    search: str = "",
    letter: Optional[str] = None
) -> List[TermSummary]:
    """Apply the listing filters: category, then free-text search or initial letter.

    A non-empty search takes precedence and the letter filter is ignored.
    "#" selects terms that do not start with a letter A-Z.
    """
    search_lower = (search or "").lower()
    letter = letter.upper() if letter else None

    def category_match(item: TermSummary) -> bool:
        if not category or category == ALL_CATEGORIES:
            return True
        return item.category == category or item.category in CATEGORY_ALIASES.get(category, ())

    def search_match(item: TermSummary) -> bool:
        return search_lower in (item.term or "").lower() or search_lower in (item.definition or "").lower()

    def letter_match(item: TermSummary) -> bool:
        if not letter:
            return True
        first_char = (item.term or "")[:1].upper()
        if letter == NON_ALPHA_LETTER:
            return not _ALPHA.match(first_char)
        return first_char == letter

    filtered = [
        item for item in terms
        if category_match(item) and (search_match(item) if search_lower else letter_match(item))
    ]
    return sorted(filtered, key=_sort_key)
