# core/stores.py
"""
In-memory stores for the weekly schedule and the subject checklists.

Both stores hold immutable snapshots and swap them wholesale on every
replace, so a reader always sees a complete old or new value. Listeners
registered with ``subscribe`` are called with the new snapshot after each
effective change.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Dict, Generic, Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar

from core.models import SEED_SCHEDULE, SEED_SUBJECT_ITEMS, DaySchedule

logger = logging.getLogger(__name__)

T = TypeVar("T")
Listener = Callable[[T], None]


class _Observable(Generic[T]):
    """Listener bookkeeping shared by both stores."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []
        self.version = 0

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that removes it again."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _publish(self, snapshot: T) -> None:
        self.version += 1
        for listener in list(self._listeners):
            listener(snapshot)


# --------------------------------------------------------------------
# Schedule store
# --------------------------------------------------------------------

class ScheduleStore(_Observable[Tuple[DaySchedule, ...]]):
    """Weekday name -> ordered subjects. The set of days never changes."""

    def __init__(self, days: Iterable[DaySchedule] = SEED_SCHEDULE) -> None:
        super().__init__()
        self._days: Tuple[DaySchedule, ...] = tuple(days)

    def get_all(self) -> Tuple[DaySchedule, ...]:
        return self._days

    def get_day(self, day_name: str) -> Optional[DaySchedule]:
        return next((d for d in self._days if d.name == day_name), None)

    def replace_day(self, day_name: str, subjects: Sequence[str]) -> None:
        """Replace the subjects of ``day_name``; unknown days are ignored."""
        index = next((i for i, d in enumerate(self._days) if d.name == day_name), -1)
        if index == -1:
            logger.debug("Ignoring schedule update for unknown day %r", day_name)
            return

        days = list(self._days)
        days[index] = DaySchedule(day_name, tuple(subjects))
        self._days = tuple(days)
        logger.info("Schedule for %s now has %d lesson(s)", day_name, len(subjects))
        self._publish(self._days)


# --------------------------------------------------------------------
# Checklist store
# --------------------------------------------------------------------

class ChecklistStore(_Observable[Mapping[str, Tuple[str, ...]]]):
    """Subject name -> ordered items to bring. Replace is an upsert."""

    def __init__(self, subject_items: Mapping[str, Sequence[str]] = SEED_SUBJECT_ITEMS) -> None:
        super().__init__()
        self._items: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {subject: tuple(items) for subject, items in subject_items.items()}
        )

    def get_all(self) -> Mapping[str, Tuple[str, ...]]:
        return self._items

    def get_items(self, subject_name: str) -> Tuple[str, ...]:
        return self._items.get(subject_name, ())

    def replace_subject(self, subject_name: str, items: Sequence[str]) -> None:
        """Create or replace the item list for ``subject_name`` (``""`` included)."""
        updated: Dict[str, Tuple[str, ...]] = dict(self._items)
        is_new = subject_name not in updated
        updated[subject_name] = tuple(items)
        self._items = MappingProxyType(updated)
        logger.info(
            "%s checklist for %r with %d item(s)",
            "Created" if is_new else "Updated", subject_name, len(items),
        )
        self._publish(self._items)
