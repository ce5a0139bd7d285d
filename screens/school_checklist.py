# screens/school_checklist.py
from __future__ import annotations
from typing import List

import pandas as pd
import streamlit as st

from core import strings
from core.forms import info
from core.models import WEEKDAYS, ChecklistLine
from core.queries import group_by_subject
from core.session import ScreenContext
from screens.utils import back

DAY_KEY = "checklist_day"


def checklist_frame(lines: List[ChecklistLine]) -> pd.DataFrame:
    """One row per item, grouped by subject in lesson order."""
    rows = [
        {strings.SUBJECT_COLUMN: subject, strings.ITEM_COLUMN: item}
        for subject, items in group_by_subject(lines)
        for item in items
    ]
    return pd.DataFrame(rows, columns=[strings.SUBJECT_COLUMN, strings.ITEM_COLUMN])


def render(ctx: ScreenContext):
    st.title(strings.TAKE_WITH_YOU)

    day = st.selectbox(strings.DAY_SELECT_LABEL, WEEKDAYS, key=DAY_KEY)
    lines = ctx.session.checklist_for(day)

    if not lines:
        info(strings.NOTHING_TO_BRING)
    for line in lines:
        item_col, subject_col = st.columns([3, 2])
        item_col.markdown(strings.bullet(line.item))
        subject_col.caption(line.subject)

    if lines:
        st.download_button(
            strings.DOWNLOAD_CSV,
            data=checklist_frame(lines).to_csv(index=False).encode("utf-8"),
            file_name=f"checklist_{day}.csv",
            mime="text/csv",
        )

    if st.button(strings.BACK, key="checklist_back"):
        back(ctx)
