from dataclasses import dataclass, asdict, fields as dc_fields
from typing import Dict, Any

from domain.constants import BOOLEAN_FIELDS


@dataclass(frozen=True)
class Registrant:
    id: int
    correl: str  # zero-padded id, fixed at creation
    cedula: str
    cedula_admin: str
    nombre_apellido: str = ""
    ciudad_residencia: str = ""
    pais: str = ""
    censo_tipo: bool = False
    afiliado: bool = False
    simpatizante: bool = False
    cod_centro_ee: str = ""
    celular: str = ""
    telefono_fijo: str = ""
    email: str = ""
    usuario_opcional: str = ""

    def form_fields(self) -> Dict[str, Any]:
        """Everything the entry form can edit (all but id/correl)."""
        data = asdict(self)
        data.pop("id")
        data.pop("correl")
        return data

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


IDENTITY_FIELDS = ("id", "correl")
FORM_FIELDS = tuple(f.name for f in dc_fields(Registrant) if f.name not in IDENTITY_FIELDS)


def empty_form() -> Dict[str, Any]:
    """Blank entry form state."""
    return {name: (False if name in BOOLEAN_FIELDS else "") for name in FORM_FIELDS}


_TRUE_TOKENS = {"true", "1", "sí", "si", "yes"}
_FALSE_TOKENS = {"false", "0", "no", ""}


def parse_flag(name: str, value: Any) -> bool:
    """Booleans pass through; strings are read as yes/no tokens, anything else is rejected."""
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        token = value.strip().lower()
        if token in _TRUE_TOKENS:
            return True
        if token in _FALSE_TOKENS:
            return False
    raise ValueError(f"Invalid value for {name}: {value!r}")


def clean_form(d: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only editable keys, filling the missing ones with blanks."""
    form = empty_form()
    for k, v in d.items():
        if k not in form:
            continue
        form[k] = parse_flag(k, v) if k in BOOLEAN_FIELDS else ("" if v is None else str(v))
    return form


def registrant_from_dict(d: Dict[str, Any]) -> Registrant:
    """Safe conversion dropping unknown keys."""
    return Registrant(id=int(d["id"]), correl=str(d["correl"]), **clean_form(d))
