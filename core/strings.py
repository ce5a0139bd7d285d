# core/strings.py
# All user-facing text lives here so screens and UI tests agree on it.
from __future__ import annotations

SCHEDULE_TITLE = "Расписание"
TAKE_WITH_YOU = "Взять с собой"
LESSON_COUNT_LABEL = "Количество уроков"
SAVE = "Сохранить"
BACK = "Назад"
EDIT_ICON = "✏️"
OPEN_DAY = "Изменить"
DAY_SELECT_LABEL = "День недели"
DOWNLOAD_CSV = "Скачать список (CSV)"
NOTHING_TO_BRING = "На этот день ничего брать не нужно."
SAVED = "Сохранено"
ITEM_COLUMN = "Предмет"
SUBJECT_COLUMN = "Урок"


def lesson_label(index: int) -> str:
    return f"Урок {index + 1}"


def item_label(index: int) -> str:
    return f"Предмет {index + 1}"


def numbered(index: int, subject: str) -> str:
    return f"{index + 1}. {subject}"


def bullet(item: str) -> str:
    return f"• {item}"
