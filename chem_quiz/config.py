from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from chem_quiz.quiz_generator import QuizMode

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DEFAULTS = {
    "catalog_dir": "catalog",
    "quiz_mode": "name_to_structure",
    "option_count": 4,
    "question_count": 10,
    "seed": None,
    "log_level": "INFO",
}


@dataclass
class Settings:
    catalog_dir: str = DEFAULTS["catalog_dir"]
    quiz_mode: str = DEFAULTS["quiz_mode"]
    option_count: int = DEFAULTS["option_count"]
    question_count: int = DEFAULTS["question_count"]
    seed: int | None = DEFAULTS["seed"]
    log_level: str = DEFAULTS["log_level"]

    @property
    def project_root(self) -> Path:
        return Path(__file__).resolve().parent.parent

    @property
    def catalog_full_path(self) -> Path:
        return self.project_root / self.catalog_dir

    @property
    def quiz_mode_enum(self) -> QuizMode:
        return QuizMode.parse(self.quiz_mode)

    def to_dict(self) -> dict:
        return {
            "catalog_dir": self.catalog_dir,
            "quiz_mode": self.quiz_mode,
            "option_count": self.option_count,
            "question_count": self.question_count,
            "seed": self.seed,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")
