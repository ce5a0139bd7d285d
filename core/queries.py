# core/queries.py
from __future__ import annotations

from typing import Iterable, List, Mapping, Sequence, Tuple

from core.models import ChecklistLine, DaySchedule


def build_checklist(
    day_name: str,
    schedule: Iterable[DaySchedule],
    items: Mapping[str, Sequence[str]],
) -> List[ChecklistLine]:
    """
    Everything to pack for ``day_name``: subjects in lesson order, each
    subject's items in checklist order. Repeated subjects repeat their items.
    A day or subject that is not found contributes nothing.
    """
    day = next((d for d in schedule if d.name == day_name), None)
    if day is None:
        return []
    return [
        ChecklistLine(item, subject)
        for subject in day.subjects
        for item in items.get(subject, ())
    ]


def group_by_subject(lines: Iterable[ChecklistLine]) -> List[Tuple[str, List[str]]]:
    """Regroup lines per subject, keeping first-appearance order."""
    grouped: dict[str, List[str]] = {}
    for line in lines:
        grouped.setdefault(line.subject, []).append(line.item)
    return list(grouped.items())
