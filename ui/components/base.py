import streamlit as st

PRIMARY_ACCENT = "#2563EB"  # blue-600
GREEN = "#059669"  # emerald-600
YELLOW = "#D97706"  # amber-600
RED = "#DC2626"  # red-600
CHIP_BG = "#374151"


def inject_base_css():
    st.markdown(
        f"""
        <style>
        .badge {{
            display:inline-block; padding:2px 8px; border-radius:12px;
            font-size:12px; line-height:16px; font-weight:600;
            background:{CHIP_BG}; color:#F9FAFB; margin-right:4px; margin-bottom:4px;
        }}
        .badge.green {{background:{GREEN};}}
        .badge.red {{background:{RED};}}
        .editing-banner {{border-left:4px solid {YELLOW}; padding:.4rem .8rem; background:#fff7ed;}}
        .row-head {{font-size:12px; font-weight:700; text-transform:uppercase; color:#374151;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def flag_badge(value: bool) -> str:
    cls = "green" if value else "red"
    return f'<span class="badge {cls}">{"✔" if value else "✘"}</span>'
