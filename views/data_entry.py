import streamlit as st

from domain.constants import FORM_LABELS, FILTER_FLAGS, EXPORT_MIME
from services.data_entry import DataEntrySession
from services.errors import ValidationError, RecordNotFound
from ui.components import (
    inject_base_css, registrant_form, registrant_table, confirm_delete_panel, metric_chip,
)


def _session() -> DataEntrySession:
    session = st.session_state.get('data_entry')
    if session is None:
        session = DataEntrySession.start(st.session_state.get('username', ''))
        st.session_state.data_entry = session
    return session


def logout():
    for k in ('username', 'data_entry'):
        st.session_state.pop(k, None)


def _render_header(session: DataEntrySession):
    c1, c2 = st.columns([5, 1])
    with c1:
        st.header("Plataforma de Registro")
        st.markdown(f"Bienvenido, **{session.username}**")
    if c2.button("Cerrar Sesión", key="logout_btn"):
        logout()
        st.rerun()


def _render_form(session: DataEntrySession):
    key_prefix = f"reg_{session.form_revision}"
    submitted = registrant_form.render(session.form, key_prefix=key_prefix, editing_id=session.editing_id)
    if session.is_editing and st.button("Cancelar", key=f"{key_prefix}_cancel"):
        session.cancel_edit()
        st.rerun()
    if submitted is None:
        return
    try:
        record = session.submit(submitted)
    except (ValidationError, RecordNotFound) as e:
        # Widgets keep what was typed; the revision did not change
        st.error(e)
        return
    st.toast(f"Registro {record.correl} guardado")
    st.rerun()


def _render_toolbar(session: DataEntrySession):
    c_search, c_filters, c_export = st.columns([3, 3, 2])
    term = c_search.text_input("Buscar", value=session.search_term, placeholder="Buscar en registros...",
                               key="search_term", label_visibility="collapsed")
    session.set_search(term)

    flag_cols = c_filters.columns(len(FILTER_FLAGS))
    for col, flag in zip(flag_cols, FILTER_FLAGS):
        enabled = col.checkbox(FORM_LABELS[flag], value=session.filters.get(flag, False), key=f"filter_{flag}")
        session.set_filter(flag, enabled)

    if session.can_export():
        filename, payload = session.export()
        c_export.download_button(f"⬇️ {session.export_label()}", payload, filename, EXPORT_MIME,
                                 key="export_btn", use_container_width=True)
    else:
        c_export.button(f"⬇️ {session.export_label()}", disabled=True, key="export_btn_disabled",
                        use_container_width=True)


def _render_counts(session: DataEntrySession):
    counts = session.counts()
    cols = st.columns(2 + len(FILTER_FLAGS))
    with cols[0]:
        metric_chip("Total", counts['total'])
    with cols[1]:
        metric_chip("Mostrados", counts['visible'])
    for col, flag in zip(cols[2:], FILTER_FLAGS):
        with col:
            metric_chip(FORM_LABELS[flag], counts[flag])


def _render_table(session: DataEntrySession):
    if session.pending_delete.is_open:
        decision = confirm_delete_panel(session.pending_delete.record_id)
        if decision is True:
            session.confirm_delete()
            st.rerun()
        elif decision is False:
            session.cancel_delete()
            st.rerun()

    visible = session.visible()
    action = registrant_table(visible)
    message = session.empty_message()
    if message:
        st.caption(message)

    if action is None:
        return
    kind, record_id = action
    if kind == "edit":
        try:
            session.start_edit(record_id)
        except RecordNotFound as e:
            st.error(e)
            return
    elif kind == "delete":
        session.request_delete(record_id)
    st.rerun()


def view():
    session = _session()
    inject_base_css()
    _render_header(session)

    with st.container(border=True):
        _render_form(session)

    with st.container(border=True):
        _render_toolbar(session)
        _render_counts(session)
        st.write("---")
        _render_table(session)
