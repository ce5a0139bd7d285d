# core/editing.py
"""
Edit buffers behind the day editor and the subject editor.

The screens keep one of these per open editor and only touch the stores
when the user presses save.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from core.stores import ChecklistStore, ScheduleStore

DEFAULT_SUBJECT_SLOTS = 4


def parse_lesson_count(text: str) -> int:
    """Lesson count typed by the user; anything that is not a whole number is 0."""
    try:
        count = int((text or "").strip())
    except ValueError:
        return 0
    return max(count, 0)


def is_blank(value: str) -> bool:
    return not (value or "").strip()


# --------------------------------------------------------------------
# Day editor
# --------------------------------------------------------------------

@dataclass
class LessonsBuffer:
    day: str
    lessons: List[str] = field(default_factory=list)

    @classmethod
    def load(cls, schedule: ScheduleStore, day: str) -> "LessonsBuffer":
        current = schedule.get_day(day)
        return cls(day, list(current.subjects) if current else [])

    @property
    def count(self) -> int:
        return len(self.lessons)

    def resize(self, count: int) -> None:
        """Truncate or pad with blanks. Dropped values are not remembered."""
        count = max(count, 0)
        self.lessons = [
            self.lessons[i] if i < len(self.lessons) else ""
            for i in range(count)
        ]

    def set_lesson(self, index: int, value: str) -> None:
        self.lessons[index] = value

    def save(self, schedule: ScheduleStore) -> None:
        # Blank lessons are kept on purpose; the day editor does not filter.
        schedule.replace_day(self.day, list(self.lessons))


# --------------------------------------------------------------------
# Subject editor
# --------------------------------------------------------------------

@dataclass
class SubjectSlots:
    subject: str
    slots: List[str] = field(default_factory=list)

    @classmethod
    def load(
        cls,
        checklist: ChecklistStore,
        subject: str,
        slot_count: int = DEFAULT_SUBJECT_SLOTS,
    ) -> "SubjectSlots":
        items = checklist.get_items(subject)
        return cls(subject, [items[i] if i < len(items) else "" for i in range(slot_count)])

    def items(self) -> List[str]:
        return non_blank(self.slots)

    def save(self, checklist: ChecklistStore) -> None:
        checklist.replace_subject(self.subject, self.items())


def non_blank(values: Sequence[str]) -> List[str]:
    """Drop blank entries, keep the rest as typed and in order."""
    return [v for v in values if not is_blank(v)]
