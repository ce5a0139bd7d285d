# core/navigation.py
"""
Typed destinations and the per-session back stack.

Each screen is reached through a small frozen dataclass instead of a route
string. Route strings (``lessons_editor/Вторник``) only exist for deep links
through the ``?route=`` query parameter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, List, MutableMapping, Optional, Union
from urllib.parse import quote, unquote

from core.models import DEFAULT_DAY, WEEKDAYS

logger = logging.getLogger(__name__)

STACK_KEY = "nav_stack"


# ============================================================================
# DESTINATIONS
# ============================================================================

@dataclass(frozen=True)
class ScheduleRoute:
    key: ClassVar[str] = "schedule"

    @property
    def route(self) -> str:
        return self.key


@dataclass(frozen=True)
class LessonsEditorRoute:
    key: ClassVar[str] = "lessons_editor"
    day: str = DEFAULT_DAY

    @property
    def route(self) -> str:
        return f"{self.key}/{quote(self.day, safe='')}"


@dataclass(frozen=True)
class SubjectEditorRoute:
    key: ClassVar[str] = "subject_editor"
    subject: str = ""

    @property
    def route(self) -> str:
        return f"{self.key}/{quote(self.subject, safe='')}"


@dataclass(frozen=True)
class ChecklistRoute:
    key: ClassVar[str] = "school_checklist"

    @property
    def route(self) -> str:
        return self.key


Destination = Union[ScheduleRoute, LessonsEditorRoute, SubjectEditorRoute, ChecklistRoute]

START_DESTINATION: Destination = ScheduleRoute()


def parse_route(route: Optional[str]) -> Destination:
    """
    Decode a route string. Anything unrecognised lands on the schedule; a
    missing or unknown day opens the first day; a missing subject is ``""``.
    """
    head, _, tail = (route or "").strip("/").partition("/")
    arg = unquote(tail)
    if head == LessonsEditorRoute.key:
        return LessonsEditorRoute(arg if arg in WEEKDAYS else DEFAULT_DAY)
    if head == SubjectEditorRoute.key:
        return SubjectEditorRoute(arg)
    if head == ChecklistRoute.key:
        return ChecklistRoute()
    return ScheduleRoute()


# ============================================================================
# BACK STACK
# ============================================================================

class Navigator:
    """Back stack kept in a session-state mapping (``st.session_state``)."""

    def __init__(self, state: MutableMapping, start: Destination = START_DESTINATION) -> None:
        self._state = state
        if STACK_KEY not in self._state:
            self._state[STACK_KEY] = [start]

    @property
    def stack(self) -> List[Destination]:
        return self._state[STACK_KEY]

    @property
    def current(self) -> Destination:
        return self.stack[-1]

    def navigate(self, destination: Destination) -> None:
        logger.debug("Navigate %s -> %s", self.current.route, destination.route)
        self._state[STACK_KEY] = self.stack + [destination]

    def pop_back(self) -> Destination:
        """Return to the previous destination; the root screen stays put."""
        if len(self.stack) > 1:
            logger.debug("Back from %s", self.current.route)
            self._state[STACK_KEY] = self.stack[:-1]
        return self.current
