"""Search + flag filtering over the roster, and the counts shown next to the table."""
import logging
from dataclasses import astuple
from typing import List, Dict, Optional, Iterable

from domain.constants import FILTER_FLAGS, MSG_EMPTY_STORE, MSG_NO_MATCHES
from domain.models import Registrant

logger = logging.getLogger(__name__)


def matches_search(record: Registrant, search_term: str) -> bool:
    if not search_term:
        return True
    needle = search_term.lower()
    return any(needle in str(v).lower() for v in astuple(record))


def matches_filters(record: Registrant, filters: Optional[Dict[str, bool]]) -> bool:
    for flag, enabled in (filters or {}).items():
        if flag not in FILTER_FLAGS:
            raise ValueError(f"Unknown filter flag: {flag}")
        if enabled and not getattr(record, flag):
            return False
    return True


def project(records: Iterable[Registrant], search_term: str = "", filters: Optional[Dict[str, bool]] = None) -> List[Registrant]:
    """Records matching the search text AND every enabled flag, in roster order."""
    visible = [r for r in records if matches_search(r, search_term) and matches_filters(r, filters)]
    logger.debug("Projection: %d record(s) for search=%r filters=%s", len(visible), search_term, filters)
    return visible


def summarize(records: List[Registrant], visible: List[Registrant]) -> Dict[str, int]:
    counts = {"total": len(records), "visible": len(visible)}
    for flag in FILTER_FLAGS:
        counts[flag] = sum(1 for r in visible if getattr(r, flag))
    return counts


def empty_message(total: int, visible: int) -> Optional[str]:
    """Placeholder text for an empty table, or None when rows are shown."""
    if visible:
        return None
    return MSG_EMPTY_STORE if total == 0 else MSG_NO_MATCHES
