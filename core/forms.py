from __future__ import annotations
import streamlit as st

FLASH_KEY = "flash"

def success(msg: str): st.success(msg)
def info(msg: str): st.info(msg)

def flash(msg: str):
    """Queue a success message for the next screen (survives one st.rerun)."""
    st.session_state[FLASH_KEY] = msg

def show_flash():
    msg = st.session_state.pop(FLASH_KEY, None)
    if msg:
        success(msg)
