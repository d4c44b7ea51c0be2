import streamlit as st
from typing import List, Optional, Tuple

from domain.constants import FIELD_LABELS, CSV_TRUE, CSV_FALSE
from domain.models import Registrant
from .base import flag_badge

# Columns shown in the compact table (the full set lives in the expander)
TABLE_COLUMNS = [
    ("id", "ID", 1),
    ("correl", "Correl", 1),
    ("cedula", "Cédula", 2),
    ("nombre_apellido", "Nombre y Apellido", 3),
    ("afiliado", "Afiliado", 1),
    ("simpatizante", "Simpat.", 1),
    ("celular", "Celular", 2),
    ("cedula_admin", "Cédula Admin", 2),
]
ACTIONS_WIDTH = 2


def records_frame(records: List[Registrant]):
    """All attributes with human readable headers; flags shown as Sí/No."""
    import pandas as _pd
    rows = []
    for r in records:
        d = r.to_dict()
        for k, v in d.items():
            if isinstance(v, bool):
                d[k] = CSV_TRUE if v else CSV_FALSE
        rows.append(d)
    df = _pd.DataFrame(rows, columns=list(FIELD_LABELS.keys()))
    return df.rename(columns=FIELD_LABELS)


def registrant_table(records: List[Registrant], key_prefix: str = "tbl") -> Optional[Tuple[str, int]]:
    """
    Renders the registrant rows with edit/delete buttons.

    Returns ("edit", id) or ("delete", id) when a row button was pressed, else None.
    """
    widths = [w for _, _, w in TABLE_COLUMNS] + [ACTIONS_WIDTH]
    head = st.columns(widths)
    for col, (_, label, _) in zip(head, TABLE_COLUMNS):
        col.markdown(f"<span class='row-head'>{label}</span>", unsafe_allow_html=True)
    head[-1].markdown("<span class='row-head'>Acciones</span>", unsafe_allow_html=True)

    action = None
    for r in records:
        cols = st.columns(widths)
        for col, (name, _, _) in zip(cols, TABLE_COLUMNS):
            value = getattr(r, name)
            if isinstance(value, bool):
                col.markdown(flag_badge(value), unsafe_allow_html=True)
            else:
                col.write(value if value != '' else '—')
        a1, a2 = cols[-1].columns(2)
        if a1.button("✏️", key=f"{key_prefix}_edit_{r.id}", help=f"Editar registro {r.id}"):
            action = ("edit", r.id)
        if a2.button("🗑️", key=f"{key_prefix}_del_{r.id}", help=f"Eliminar registro {r.id}"):
            action = ("delete", r.id)

    if records:
        with st.expander("Ver todas las columnas", expanded=False):
            st.dataframe(records_frame(records), hide_index=True, use_container_width=True)
    return action


def confirm_delete_panel(record_id: int, key_prefix: str = "confirm") -> Optional[bool]:
    """True on confirm, False on cancel, None while undecided."""
    with st.container(border=True):
        st.markdown("**Confirmar Eliminación**")
        st.warning(f"¿Está seguro que desea eliminar el registro con ID {record_id}? Esta acción no se puede deshacer.")
        c1, c2 = st.columns(2)
        if c1.button("Eliminar", key=f"{key_prefix}_yes_{record_id}", type="primary"):
            return True
        if c2.button("Cancelar", key=f"{key_prefix}_no_{record_id}"):
            return False
    return None
