"""
CSV export of the visible registrants.

Layout: fixed header labels, `id`/`correl` unquoted, flags as Sí/No, every
free-text value in double quotes (embedded quotes doubled). Lines are joined
with "\\n" and the payload starts with a BOM so spreadsheet apps pick UTF-8.
"""
import datetime as dt
import logging
from typing import List, Optional, Sequence

from domain.constants import (
    FIELD_LABELS, BOOLEAN_FIELDS, CSV_TRUE, CSV_FALSE, CSV_BOM, EXPORT_PREFIX,
)
from domain.models import Registrant, IDENTITY_FIELDS
from services.errors import NothingToExport

logger = logging.getLogger(__name__)

COLUMNS = tuple(FIELD_LABELS.keys())


def _quote(text: str) -> str:
    return '"' + str(text).replace('"', '""') + '"'


def _cell(record: Registrant, name: str) -> str:
    value = getattr(record, name)
    if name in IDENTITY_FIELDS:
        return str(value)
    if name in BOOLEAN_FIELDS:
        return CSV_TRUE if value else CSV_FALSE
    return _quote(value)


def header_row() -> str:
    return ",".join(FIELD_LABELS[c] for c in COLUMNS)


def to_csv(records: Sequence[Registrant]) -> str:
    lines = [header_row()]
    lines.extend(",".join(_cell(r, c) for c in COLUMNS) for r in records)
    return CSV_BOM + "\n".join(lines)


def export_filename(day: Optional[dt.date] = None) -> str:
    day = day or dt.date.today()
    return f"{EXPORT_PREFIX}_{day.isoformat()}.csv"


def export_bytes(records: List[Registrant]) -> bytes:
    """UTF-8 payload for the download button; refuses an empty projection."""
    if not records:
        raise NothingToExport()
    logger.info("Exporting %d registrant(s)", len(records))
    return to_csv(records).encode("utf-8")
