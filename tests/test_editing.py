import pytest

from core.editing import LessonsBuffer, SubjectSlots, non_blank, parse_lesson_count


@pytest.mark.parametrize(
    "text, expected",
    [("4", 4), (" 2 ", 2), ("", 0), ("abc", 0), ("2.5", 0), ("-3", 0), ("0", 0)],
)
def test_parse_lesson_count(text, expected):
    assert parse_lesson_count(text) == expected


def test_lessons_buffer_loads_day(schedule_store):
    buffer = LessonsBuffer.load(schedule_store, "Суббота")

    assert buffer.count == 5
    assert buffer.lessons[-1] == "Литература"


def test_lessons_buffer_unknown_day_is_empty(schedule_store):
    assert LessonsBuffer.load(schedule_store, "Воскресенье").lessons == []


def test_shrink_then_grow_pads_with_blanks(schedule_store):
    buffer = LessonsBuffer.load(schedule_store, "Понедельник")

    buffer.resize(2)
    buffer.resize(4)

    assert buffer.lessons == ["Математика", "Русский язык", "", ""]


def test_resize_keeps_edited_values(schedule_store):
    buffer = LessonsBuffer.load(schedule_store, "Понедельник")
    buffer.set_lesson(1, "Химия")

    buffer.resize(6)

    assert buffer.lessons == ["Математика", "Химия", "География", "Физ. культура", "", ""]


def test_resize_to_zero(schedule_store):
    buffer = LessonsBuffer.load(schedule_store, "Вторник")

    buffer.resize(0)

    assert buffer.lessons == []


def test_day_save_keeps_blanks(schedule_store):
    buffer = LessonsBuffer.load(schedule_store, "Понедельник")
    buffer.resize(2)
    buffer.resize(3)

    buffer.save(schedule_store)

    assert schedule_store.get_day("Понедельник").subjects == ("Математика", "Русский язык", "")


def test_subject_slots_pad_to_four(checklist_store):
    slots = SubjectSlots.load(checklist_store, "Литература")

    assert slots.slots == ["Тетрадь", "Книга", "", ""]


def test_subject_slots_for_unknown_subject(checklist_store):
    assert SubjectSlots.load(checklist_store, "").slots == ["", "", "", ""]


def test_subject_save_filters_blanks(checklist_store):
    slots = SubjectSlots("Литература", ["Тетрадь", "", "Книга", ""])

    slots.save(checklist_store)

    assert checklist_store.get_items("Литература") == ("Тетрадь", "Книга")


def test_subject_save_with_whitespace_only_slot(checklist_store):
    slots = SubjectSlots("Музыка", ["  ", "Ноты", "\t", " Флейта "])

    slots.save(checklist_store)

    assert checklist_store.get_items("Музыка") == ("Ноты", " Флейта ")


def test_subject_slots_respect_slot_count(checklist_store):
    slots = SubjectSlots.load(checklist_store, "Математика", slot_count=6)

    assert slots.slots == ["Тетрадь", "Учебник", "Линейка", "", "", ""]


def test_non_blank_keeps_order():
    assert non_blank(["b", "", "a", " "]) == ["b", "a"]
