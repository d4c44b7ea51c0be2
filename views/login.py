import streamlit as st

from domain.constants import MSG_LOGIN_FAILED
from services.auth import authenticate
from services.data_entry import DataEntrySession


def view():
    st.title("Sistema de Registro")
    st.caption("Acceso para personal autorizado")

    with st.form("login_form"):
        username = st.text_input("Usuario", key="login_username")
        password = st.text_input("Contraseña", type="password", key="login_password")
        submitted = st.form_submit_button("Iniciar Sesión", type="primary")

    if submitted:
        user = authenticate(username, password)
        if user is None:
            st.error(MSG_LOGIN_FAILED)
            return
        st.session_state.username = user
        st.session_state.data_entry = DataEntrySession.start(user)
        st.rerun()
