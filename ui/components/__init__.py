"""
This package provides the reusable UI components for the Streamlit application.

- `base`: CSS injector and small HTML badges.
- `registrant_form`: the add/update registrant form.
- `table`: the registrant table with row actions and the delete confirmation panel.

Import from here (`from ui import components`) rather than from the modules.
"""

from .base import (
    inject_base_css,
    flag_badge,
)

from .table import (
    records_frame,
    registrant_table,
    confirm_delete_panel,
)

from . import registrant_form

from typing import Any
import streamlit as st


def metric_chip(label: str, value: Any):
    """
    Displays a metric in a compact, chip-like format.
    """
    st.markdown(
        f"""
        <div style="
            background-color: #f0f2f6;
            border-radius: 16px;
            padding: 8px 16px;
            text-align: center;
        ">
            <div style="font-size: 0.9em; color: #555;">{label}</div>
            <div style="font-size: 1.2em; font-weight: bold;">{value}</div>
        </div>
        """,
        unsafe_allow_html=True
    )
