# screens/schedule.py
from __future__ import annotations
import streamlit as st

from core import strings
from core.forms import show_flash
from core.models import DaySchedule
from core.navigation import ChecklistRoute, LessonsEditorRoute
from core.session import ScreenContext
from screens.utils import go


def _rows(days, per_row: int):
    return [days[i:i + per_row] for i in range(0, len(days), per_row)]


def _day_card(ctx: ScreenContext, day: DaySchedule):
    with st.container(border=True):
        st.subheader(day.name)
        lines = [strings.numbered(i, subject) for i, subject in enumerate(day.subjects)]
        if lines:
            st.markdown("\n".join(lines))
        if st.button(strings.OPEN_DAY, key=f"open_day_{day.name}"):
            go(ctx, LessonsEditorRoute(day.name))


def render(ctx: ScreenContext):
    st.title(strings.SCHEDULE_TITLE)
    show_flash()

    per_row = ctx.settings.ui.cards_per_row
    for row in _rows(ctx.session.schedule.get_all(), per_row):
        cols = st.columns(per_row)
        for col, day in zip(cols, row):
            with col:
                _day_card(ctx, day)

    if st.button(strings.TAKE_WITH_YOU, key="open_checklist", type="primary"):
        go(ctx, ChecklistRoute())
