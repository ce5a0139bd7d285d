# screens/subject_editor.py
from __future__ import annotations
import streamlit as st

from core import strings
from core.editing import SubjectSlots
from core.forms import flash
from core.session import ScreenContext
from screens.utils import EDITOR_PREFIX, back

SLOTS_KEY = f"{EDITOR_PREFIX}subject_slots"


def slot_key(index: int) -> str:
    return f"{EDITOR_PREFIX}item_{index}"


def _load_slots(ctx: ScreenContext, subject: str) -> SubjectSlots:
    slots = st.session_state.get(SLOTS_KEY)
    if slots is None or slots.subject != subject:
        slots = SubjectSlots.load(
            ctx.session.checklist, subject, slot_count=ctx.settings.ui.subject_slots
        )
        st.session_state[SLOTS_KEY] = slots
        for i, value in enumerate(slots.slots):
            st.session_state[slot_key(i)] = value
    return slots


def render(ctx: ScreenContext):
    subject = ctx.destination.subject
    slots = _load_slots(ctx, subject)

    st.title(subject)
    st.subheader(strings.TAKE_WITH_YOU)

    for i in range(len(slots.slots)):
        st.text_input(strings.item_label(i), key=slot_key(i))

    if st.button(strings.SAVE, key=f"{EDITOR_PREFIX}save_subject", type="primary"):
        slots.slots = [st.session_state.get(slot_key(i), "") for i in range(len(slots.slots))]
        slots.save(ctx.session.checklist)
        flash(strings.SAVED)
        back(ctx)
