"""
In-memory registrant store.

Owns the ordered roster and hands out ids. Every mutation of the roster goes
through `RegistrantStore`; callers get copies, never the internal list.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any, Iterable, Iterator, Optional

from domain.constants import REQUIRED_FIELDS
from domain.models import Registrant, clean_form, registrant_from_dict
from services.errors import ValidationError, RecordNotFound
from utils.ids import next_sequential_id, make_correl

logger = logging.getLogger(__name__)


def missing_required(fields: Dict[str, Any]) -> List[str]:
    """Names of required fields that are empty or whitespace-only."""
    return [name for name in REQUIRED_FIELDS if not str(fields.get(name) or '').strip()]


def validate(fields: Dict[str, Any]):
    missing = missing_required(fields)
    if missing:
        logger.warning("Rejected registrant: missing %s", ", ".join(missing))
        raise ValidationError(missing)


class RegistrantStore:
    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None):
        self._records: List[Registrant] = []
        self.version = 0
        for d in seed or []:
            record = registrant_from_dict(d)
            if self.get(record.id) is not None:
                raise ValueError(f"Duplicate registrant id in seed: {record.id}")
            validate(record.form_fields())
            self._records.append(record)

    def __len__(self):
        return len(self._records)

    def __iter__(self) -> Iterator[Registrant]:
        return iter(list(self._records))

    @property
    def records(self) -> List[Registrant]:
        return list(self._records)

    def next_id(self) -> int:
        return next_sequential_id(r.id for r in self._records)

    def get(self, record_id: int) -> Optional[Registrant]:
        return next((r for r in self._records if r.id == record_id), None)

    def add(self, fields: Dict[str, Any]) -> Registrant:
        validate(fields)
        new_id = self.next_id()
        record = Registrant(id=new_id, correl=make_correl(new_id), **clean_form(fields))
        self._records.append(record)
        self.version += 1
        logger.info("Added registrant %s (%s)", record.id, record.correl)
        return record

    def update(self, record_id: int, fields: Dict[str, Any]) -> Registrant:
        validate(fields)
        idx = next((i for i, r in enumerate(self._records) if r.id == record_id), None)
        if idx is None:
            raise RecordNotFound(record_id)
        current = self._records[idx]
        updated = Registrant(id=current.id, correl=current.correl, **clean_form(fields))
        self._records[idx] = updated
        self.version += 1
        logger.info("Updated registrant %s", record_id)
        return updated

    def delete(self, record_id: int) -> bool:
        """Remove the record; returns False (and changes nothing) when absent."""
        remaining = [r for r in self._records if r.id != record_id]
        if len(remaining) == len(self._records):
            logger.debug("Delete of unknown registrant %s ignored", record_id)
            return False
        self._records = remaining
        self.version += 1
        logger.info("Deleted registrant %s", record_id)
        return True
