"""Exceptions raised by the registry services.

Views catch these and show them with ``st.error``; services never render.
"""
from typing import Sequence

from domain.constants import MSG_REQUIRED, MSG_NOTHING_TO_EXPORT


class RegistryError(Exception):
    pass


class ValidationError(RegistryError, ValueError):
    """Required fields (cédula / cédula admin) are missing."""

    def __init__(self, missing: Sequence[str], message: str = MSG_REQUIRED):
        super().__init__(message)
        self.missing = tuple(missing)


class RecordNotFound(RegistryError, LookupError):
    def __init__(self, record_id):
        super().__init__(f"Registro con ID {record_id} no encontrado")
        self.record_id = record_id


class NothingToExport(RegistryError):
    def __init__(self, message: str = MSG_NOTHING_TO_EXPORT):
        super().__init__(message)
