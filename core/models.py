# core/models.py
"""
Data models for the weekly schedule and the subject checklists.
Contains the fixed weekday set, value types and the seed data a new
session starts with.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, NamedTuple, Tuple


# ============================================================================
# CONSTANTS
# ============================================================================

# Display order is load-bearing: the schedule grid and the day selector
# both follow it.
WEEKDAYS: Tuple[str, ...] = (
    "Понедельник",
    "Вторник",
    "Среда",
    "Четверг",
    "Пятница",
    "Суббота",
)

DEFAULT_DAY = WEEKDAYS[0]


# ============================================================================
# DATA CLASSES
# ============================================================================

@dataclass(frozen=True)
class DaySchedule:
    """One weekday and the subjects taught on it, in lesson order."""
    name: str
    subjects: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable snapshot
        object.__setattr__(self, "subjects", tuple(self.subjects))


class ChecklistLine(NamedTuple):
    """One thing to bring, tagged with the subject that needs it."""
    item: str
    subject: str


# ============================================================================
# SEED DATA
# ============================================================================

_WEEKDAY_SUBJECTS: Tuple[str, ...] = (
    "Математика",
    "Русский язык",
    "География",
    "Физ. культура",
)

SEED_SCHEDULE: Tuple[DaySchedule, ...] = (
    DaySchedule("Понедельник", _WEEKDAY_SUBJECTS),
    DaySchedule("Вторник", _WEEKDAY_SUBJECTS),
    DaySchedule("Среда", _WEEKDAY_SUBJECTS),
    DaySchedule("Четверг", _WEEKDAY_SUBJECTS),
    DaySchedule("Пятница", _WEEKDAY_SUBJECTS),
    DaySchedule("Суббота", _WEEKDAY_SUBJECTS + ("Литература",)),
)

SEED_SUBJECT_ITEMS: Dict[str, Tuple[str, ...]] = {
    "Математика": ("Тетрадь", "Учебник", "Линейка"),
    "Русский язык": ("Тетрадь", "Учебник"),
    "География": ("Тетрадь", "Атлас", "Контурные карты"),
    "Физ. культура": ("Спортивная форма",),
    "Литература": ("Тетрадь", "Книга"),
}
