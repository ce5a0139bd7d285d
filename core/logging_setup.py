# core/logging_setup.py
from __future__ import annotations
import logging

from core.settings import Settings


def configure_logging(settings: Settings) -> None:
    """Server-side logging for the whole app. Safe to call on every rerun."""
    level = getattr(logging, settings.logging.level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=settings.logging.format)
    logging.getLogger().setLevel(level)
