"""Shared fixtures for store, query and UI tests."""

from pathlib import Path

import pytest

from core.models import SEED_SCHEDULE, SEED_SUBJECT_ITEMS
from core.session import SchoolSession
from core.stores import ChecklistStore, ScheduleStore

APP_PATH = Path(__file__).resolve().parents[1] / "app.py"


@pytest.fixture
def schedule_store() -> ScheduleStore:
    return ScheduleStore()


@pytest.fixture
def checklist_store() -> ChecklistStore:
    return ChecklistStore()


@pytest.fixture
def school_session(schedule_store, checklist_store) -> SchoolSession:
    return SchoolSession(schedule_store, checklist_store)


@pytest.fixture
def seed_schedule():
    return SEED_SCHEDULE


@pytest.fixture
def seed_items():
    return SEED_SUBJECT_ITEMS


@pytest.fixture
def app_path() -> str:
    return str(APP_PATH)
