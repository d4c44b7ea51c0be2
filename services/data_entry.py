"""
State and callbacks behind the data-entry page.

One `DataEntrySession` is created per login and kept in `st.session_state`.
The view only reads from it and calls its entry points; it never touches the
store directly.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Tuple

from domain.constants import FILTER_FLAGS, SAMPLE_REGISTRANTS, MSG_NOTHING_TO_EXPORT
from domain.models import Registrant, empty_form, clean_form
from services import projection, export
from services.errors import RecordNotFound
from services.registry import RegistrantStore

logger = logging.getLogger(__name__)


@dataclass
class DeleteConfirmation:
    """Idle when `record_id` is None, otherwise waiting on confirm/cancel."""
    record_id: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.record_id is not None


def _no_filters() -> Dict[str, bool]:
    return {flag: False for flag in FILTER_FLAGS}


@dataclass
class DataEntrySession:
    username: str
    store: RegistrantStore
    search_term: str = ""
    filters: Dict[str, bool] = field(default_factory=_no_filters)
    editing_id: Optional[int] = None
    form: Dict[str, Any] = field(default_factory=empty_form)
    pending_delete: DeleteConfirmation = field(default_factory=DeleteConfirmation)
    form_revision: int = 0  # bumped whenever the form widgets must reload
    _cache_key: Optional[Tuple] = field(default=None, repr=False)
    _cache: List[Registrant] = field(default_factory=list, repr=False)

    @classmethod
    def start(cls, username: str, seed=None) -> "DataEntrySession":
        """Fresh session seeded with the sample roster unless `seed` is given."""
        return cls(username=username, store=RegistrantStore(SAMPLE_REGISTRANTS if seed is None else seed))

    # --- form ---
    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def submit(self, fields: Dict[str, Any]) -> Registrant:
        """Add, or update the record under edit. Form is kept intact on failure."""
        self.form = clean_form(fields)
        if self.is_editing:
            record = self.store.update(self.editing_id, fields)
            self.editing_id = None
        else:
            record = self.store.add(fields)
        self._load_form(empty_form())
        return record

    def start_edit(self, record_id: int) -> Dict[str, Any]:
        record = self.store.get(record_id)
        if record is None:
            raise RecordNotFound(record_id)
        self.editing_id = record.id
        self._load_form(record.form_fields())
        return self.form

    def cancel_edit(self):
        self.editing_id = None
        self._load_form(empty_form())

    def _load_form(self, values: Dict[str, Any]):
        self.form = values
        self.form_revision += 1

    # --- delete (two-phase) ---
    def request_delete(self, record_id: int):
        logger.debug("Delete requested for registrant %s", record_id)
        self.pending_delete = DeleteConfirmation(record_id)

    def confirm_delete(self) -> bool:
        record_id = self.pending_delete.record_id
        self.pending_delete = DeleteConfirmation()
        if record_id is None:
            return False
        if record_id == self.editing_id:
            self.cancel_edit()
        return self.store.delete(record_id)

    def cancel_delete(self):
        logger.debug("Delete cancelled for registrant %s", self.pending_delete.record_id)
        self.pending_delete = DeleteConfirmation()

    # --- search / filters ---
    def set_search(self, term: str):
        self.search_term = term or ""

    def set_filter(self, flag: str, enabled: bool):
        if flag not in FILTER_FLAGS:
            raise ValueError(f"Unknown filter flag: {flag}")
        self.filters = {**self.filters, flag: bool(enabled)}

    def clear_filters(self):
        self.filters = _no_filters()

    # --- projection ---
    def visible(self) -> List[Registrant]:
        key = (self.store.version, self.search_term, tuple(sorted(self.filters.items())))
        if key != self._cache_key:
            self._cache = projection.project(self.store, self.search_term, self.filters)
            self._cache_key = key
        return list(self._cache)

    def counts(self) -> Dict[str, int]:
        return projection.summarize(self.store.records, self.visible())

    def empty_message(self) -> Optional[str]:
        return projection.empty_message(len(self.store), len(self.visible()))

    # --- export ---
    def can_export(self) -> bool:
        return bool(self.visible())

    def export_label(self) -> str:
        n = len(self.visible())
        return f"Exportar {n} registro(s)" if n else MSG_NOTHING_TO_EXPORT

    def export(self, day=None) -> Tuple[str, bytes]:
        payload = export.export_bytes(self.visible())
        return export.export_filename(day), payload
