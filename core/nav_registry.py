# core/nav_registry.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List

from core.navigation import ChecklistRoute, LessonsEditorRoute, ScheduleRoute, SubjectEditorRoute
from core.session import ScreenContext
from core import strings

# Page renderer signature: (ctx) -> None
PageFn = Callable[[ScreenContext], None]

@dataclass(frozen=True)
class Route:
    key: str                  # stable id, same as the destination's key
    label: str                # UI label, used in error messages
    icon: str                 # emoji or short string
    render: PageFn            # callable that renders the page

# Prefer "screens" modules so nothing renders on import.
from screens.schedule import render as schedule_render
from screens.lessons_editor import render as lessons_editor_render
from screens.subject_editor import render as subject_editor_render
from screens.school_checklist import render as school_checklist_render

ROUTES: List[Route] = [
    Route(ScheduleRoute.key,      strings.SCHEDULE_TITLE, "🗓️", schedule_render),
    Route(LessonsEditorRoute.key, "Уроки",                "📝", lessons_editor_render),
    Route(SubjectEditorRoute.key, "Предмет",              "✏️", subject_editor_render),
    Route(ChecklistRoute.key,     strings.TAKE_WITH_YOU,  "🎒", school_checklist_render),
]

# Index for quick lookup (used by the router in app.py)
ROUTE_INDEX: Dict[str, Route] = {r.key: r for r in ROUTES}
