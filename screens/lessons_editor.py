# screens/lessons_editor.py
# -------------------------------------------------------------------
# Day editor: lesson count plus one text field per lesson.
# The edit buffer lives in session state until save or navigation.
# -------------------------------------------------------------------
from __future__ import annotations
import streamlit as st

from core import strings
from core.editing import LessonsBuffer, parse_lesson_count
from core.forms import flash, show_flash
from core.navigation import SubjectEditorRoute
from core.session import ScreenContext
from screens.utils import EDITOR_PREFIX, back, go

BUFFER_KEY = f"{EDITOR_PREFIX}lessons_buffer"
COUNT_KEY = f"{EDITOR_PREFIX}lesson_count"


def lesson_key(index: int) -> str:
    return f"{EDITOR_PREFIX}lesson_{index}"


def _seed_widgets(buffer: LessonsBuffer):
    st.session_state[COUNT_KEY] = str(buffer.count)
    for i, lesson in enumerate(buffer.lessons):
        st.session_state[lesson_key(i)] = lesson


def _sync_from_widgets(buffer: LessonsBuffer):
    for i in range(buffer.count):
        buffer.set_lesson(i, st.session_state.get(lesson_key(i), buffer.lessons[i]))


def _on_count_change():
    buffer: LessonsBuffer = st.session_state[BUFFER_KEY]
    _sync_from_widgets(buffer)
    buffer.resize(parse_lesson_count(st.session_state.get(COUNT_KEY, "")))
    _seed_widgets(buffer)


def _load_buffer(ctx: ScreenContext, day: str) -> LessonsBuffer:
    buffer = st.session_state.get(BUFFER_KEY)
    if buffer is None or buffer.day != day:
        buffer = LessonsBuffer.load(ctx.session.schedule, day)
        st.session_state[BUFFER_KEY] = buffer
        _seed_widgets(buffer)
    return buffer


def render(ctx: ScreenContext):
    day = ctx.destination.day
    buffer = _load_buffer(ctx, day)

    st.header(day)
    show_flash()
    st.text_input(strings.LESSON_COUNT_LABEL, key=COUNT_KEY, on_change=_on_count_change)

    for i in range(buffer.count):
        field_col, edit_col = st.columns([6, 1], vertical_alignment="bottom")
        with field_col:
            st.text_input(strings.lesson_label(i), key=lesson_key(i))
        with edit_col:
            if st.button(strings.EDIT_ICON, key=f"{EDITOR_PREFIX}open_subject_{i}"):
                # Opens whatever is typed right now, saved or not
                go(ctx, SubjectEditorRoute(st.session_state.get(lesson_key(i), "")))

    if st.button(strings.SAVE, key=f"{EDITOR_PREFIX}save_day", type="primary"):
        _sync_from_widgets(buffer)
        buffer.save(ctx.session.schedule)
        flash(strings.SAVED)
        back(ctx)
