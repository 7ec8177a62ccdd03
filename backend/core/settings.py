# core/settings.py

import os
from pathlib import Path

import yaml

BASE_DIR = Path(__file__).resolve().parent.parent          # backend/
SETTINGS_PATH = BASE_DIR / "config" / "settings.yaml"

DEFAULTS = {
    "database_uri": "sqlite:///reviews.db",
    "cors_origins": ["http://localhost:3000"],
    "create_tables": True,
    "json_sort_keys": False,
    "host": "127.0.0.1",
    "port": 5555,
    "debug": False,
    "seed_dir": "data/seed",
}

TRUE_STRINGS = ("1", "true", "yes", "on")


def load_settings(path=None) -> dict:
    """
    Read settings.yaml and layer environment overrides on top.

    Lookup order (last wins):
      1. DEFAULTS
      2. the YAML file (`path`, else $REVIEWS_SETTINGS, else config/settings.yaml)
      3. $REVIEWS_DATABASE_URI / $REVIEWS_DEBUG
    """
    settings = dict(DEFAULTS)

    if path is None:
        path = os.environ.get("REVIEWS_SETTINGS") or SETTINGS_PATH
    path = Path(path)

    if path.exists():
        with open(path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{path} must contain a mapping, got {type(loaded).__name__}")
        settings.update(loaded)

    if os.environ.get("REVIEWS_DATABASE_URI"):
        settings["database_uri"] = os.environ["REVIEWS_DATABASE_URI"]

    if os.environ.get("REVIEWS_DEBUG") is not None:
        settings["debug"] = os.environ["REVIEWS_DEBUG"].strip().lower() in TRUE_STRINGS

    return settings


def to_flask_config(settings: dict) -> dict:
    return {
        "SQLALCHEMY_DATABASE_URI": settings["database_uri"],
        "CORS_ORIGINS": settings["cors_origins"],
        "CREATE_TABLES": settings["create_tables"],
        "JSON_SORT_KEYS": settings["json_sort_keys"],
        "DEBUG": settings["debug"],
        "SEED_DIR": settings["seed_dir"],
    }
