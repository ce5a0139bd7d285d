# core/session.py
"""
Per-session application state.

``SchoolSession`` owns the two stores for as long as the browser session
lives. The derived checklist is memoised on the selected day and the store
versions, and the memo is dropped whenever a store publishes a change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, MutableMapping, Optional, Tuple

from core.models import ChecklistLine
from core.navigation import Destination, Navigator
from core.queries import build_checklist
from core.settings import Settings
from core.stores import ChecklistStore, ScheduleStore

logger = logging.getLogger(__name__)

SESSION_KEY = "school_session"


class SchoolSession:
    def __init__(
        self,
        schedule: Optional[ScheduleStore] = None,
        checklist: Optional[ChecklistStore] = None,
    ) -> None:
        self.schedule = schedule or ScheduleStore()
        self.checklist = checklist or ChecklistStore()
        self._memo: Dict[Tuple[str, int, int], List[ChecklistLine]] = {}
        self.schedule.subscribe(self._invalidate)
        self.checklist.subscribe(self._invalidate)

    def _invalidate(self, _snapshot) -> None:
        self._memo.clear()

    def checklist_for(self, day_name: str) -> List[ChecklistLine]:
        key = (day_name, self.schedule.version, self.checklist.version)
        if key not in self._memo:
            self._memo[key] = build_checklist(
                day_name, self.schedule.get_all(), self.checklist.get_all()
            )
        return list(self._memo[key])


def get_school_session(state: MutableMapping) -> SchoolSession:
    """Create the session state on first access, reuse it afterwards."""
    if SESSION_KEY not in state:
        logger.info("Starting a new school session")
        state[SESSION_KEY] = SchoolSession()
    return state[SESSION_KEY]


@dataclass
class ScreenContext:
    """Everything a screen renderer needs for one rerun."""
    session: SchoolSession
    navigator: Navigator
    destination: Destination
    settings: Settings
