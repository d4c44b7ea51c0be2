import streamlit as st
from typing import Dict, Any, Optional

from domain.constants import FORM_LABELS, BOOLEAN_FIELDS, REQUIRED_FIELDS

TEXT_FIELDS = [f for f in FORM_LABELS if f not in BOOLEAN_FIELDS]


def render(form_data: Dict[str, Any], key_prefix: str, editing_id: Optional[int] = None) -> Optional[Dict[str, Any]]:
    """
    Renders the add/update registrant form.

    Args:
        form_data (Dict[str, Any]): Values to prefill (blank form or the record being edited).
        key_prefix (str): A unique prefix for Streamlit widget keys. Change it to reset the widgets.
        editing_id (Optional[int]): Id of the record under edit, None when adding.

    Returns:
        Dict[str, Any]: The submitted values, or None if not submitted.
    """
    with st.form(f"form_{key_prefix}"):
        st.subheader(f"Editando Inscrito ID: {editing_id}" if editing_id else "Añadir Nuevo Inscrito")

        values: Dict[str, Any] = {}
        cols = st.columns(3)
        for i, name in enumerate(TEXT_FIELDS):
            label = FORM_LABELS[name] + (" *" if name in REQUIRED_FIELDS else "")
            values[name] = cols[i % 3].text_input(label, value=form_data.get(name, ''), key=f"{key_prefix}_{name}")

        flag_cols = st.columns(len(BOOLEAN_FIELDS))
        for col, name in zip(flag_cols, BOOLEAN_FIELDS):
            values[name] = col.checkbox(FORM_LABELS[name], value=bool(form_data.get(name)), key=f"{key_prefix}_{name}")

        submit_label = "✏️ Actualizar Registro" if editing_id else "➕ Añadir Registro"
        submitted = st.form_submit_button(submit_label, type="primary")

    if submitted:
        return values
    return None
