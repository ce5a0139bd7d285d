import pytest

from core.models import WEEKDAYS, DaySchedule
from core.stores import ChecklistStore, ScheduleStore


def test_schedule_seed_has_six_days_in_order(schedule_store):
    days = schedule_store.get_all()

    assert [d.name for d in days] == list(WEEKDAYS)
    assert days[0].subjects == ("Математика", "Русский язык", "География", "Физ. культура")
    assert days[5].subjects[-1] == "Литература"
    assert len(days[5].subjects) == 5


@pytest.mark.parametrize("day", WEEKDAYS)
def test_replace_day_changes_only_that_day(schedule_store, day):
    before = schedule_store.get_all()

    schedule_store.replace_day(day, ["Химия", "Физика"])

    after = schedule_store.get_all()
    assert [d.name for d in after] == list(WEEKDAYS)
    for old, new in zip(before, after):
        if new.name == day:
            assert new.subjects == ("Химия", "Физика")
        else:
            assert new == old


def test_replace_unknown_day_is_ignored(schedule_store):
    before = schedule_store.get_all()

    schedule_store.replace_day("NotADay", ["Химия"])

    assert schedule_store.get_all() == before
    assert len(schedule_store.get_all()) == 6
    assert schedule_store.version == 0


def test_replace_day_keeps_blank_and_repeated_subjects(schedule_store):
    schedule_store.replace_day("Среда", ["Математика", "", "Математика"])

    assert schedule_store.get_day("Среда").subjects == ("Математика", "", "Математика")


def test_get_all_is_a_snapshot(schedule_store):
    snapshot = schedule_store.get_all()

    schedule_store.replace_day("Вторник", [])

    assert snapshot[1].subjects == ("Математика", "Русский язык", "География", "Физ. культура")
    assert schedule_store.get_day("Вторник").subjects == ()


def test_get_day_unknown_returns_none(schedule_store):
    assert schedule_store.get_day("Воскресенье") is None


def test_schedule_listeners_get_new_snapshot(schedule_store):
    seen = []
    unsubscribe = schedule_store.subscribe(seen.append)

    schedule_store.replace_day("Пятница", ["Музыка"])
    schedule_store.replace_day("NotADay", ["Музыка"])
    unsubscribe()
    schedule_store.replace_day("Пятница", ["ИЗО"])

    assert len(seen) == 1
    assert seen[0][4] == DaySchedule("Пятница", ("Музыка",))
    assert schedule_store.version == 2


def test_checklist_seed(checklist_store):
    items = checklist_store.get_all()

    assert list(items) == ["Математика", "Русский язык", "География", "Физ. культура", "Литература"]
    assert items["Физ. культура"] == ("Спортивная форма",)
    assert items["География"] == ("Тетрадь", "Атлас", "Контурные карты")


def test_replace_subject_creates_new_entry(checklist_store):
    size = len(checklist_store.get_all())

    checklist_store.replace_subject("Химия", ["Халат", "Очки"])

    items = checklist_store.get_all()
    assert len(items) == size + 1
    assert items["Химия"] == ("Халат", "Очки")


def test_replace_subject_replaces_existing_entry_only(checklist_store):
    before = dict(checklist_store.get_all())

    checklist_store.replace_subject("Математика", ["Циркуль"])

    after = checklist_store.get_all()
    assert len(after) == len(before)
    assert after["Математика"] == ("Циркуль",)
    assert {k: v for k, v in after.items() if k != "Математика"} == {
        k: v for k, v in before.items() if k != "Математика"
    }


def test_replace_subject_accepts_empty_name(checklist_store):
    checklist_store.replace_subject("", ["Пенал"])

    assert checklist_store.get_items("") == ("Пенал",)


def test_get_items_missing_subject_is_empty(checklist_store):
    assert checklist_store.get_items("Астрономия") == ()


def test_checklist_snapshot_is_read_only(checklist_store):
    with pytest.raises(TypeError):
        checklist_store.get_all()["Математика"] = ("x",)


def test_checklist_listener_called_on_every_upsert():
    store = ChecklistStore({})
    seen = []
    store.subscribe(seen.append)

    store.replace_subject("Музыка", ["Ноты"])
    store.replace_subject("Музыка", [])

    assert [dict(s) for s in seen] == [{"Музыка": ("Ноты",)}, {"Музыка": ()}]
    assert store.version == 2


def test_custom_initial_schedule():
    store = ScheduleStore([DaySchedule("Понедельник", ["Чтение"])])

    assert store.get_all() == (DaySchedule("Понедельник", ("Чтение",)),)
