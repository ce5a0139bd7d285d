from __future__ import annotations
import yaml
from functools import lru_cache
from pathlib import Path
from pydantic import BaseModel, Field

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[1] / "config" / "settings.yaml"

class AppConfig(BaseModel):
    name: str
    page_icon: str = "🎒"
    layout: str = "centered"

class UIConfig(BaseModel):
    cards_per_row: int = Field(default=2, ge=1)
    subject_slots: int = Field(default=4, ge=1)

class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

class Settings(BaseModel):
    app: AppConfig
    ui: UIConfig = UIConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False

@lru_cache(maxsize=None)
def load_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> Settings:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return Settings(
        app=AppConfig(**(data.get("app") or {})),
        ui=UIConfig(**(data.get("ui") or {})),
        logging=LoggingConfig(**(data.get("logging") or {})),
        debug=bool(data.get("debug", False)),
    )
