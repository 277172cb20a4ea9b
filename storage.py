# storage.py
from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

# path setup
ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = Path(os.environ.get("COUNTDOWN_DATA_DIR") or ROOT_DIR / "data")
CONFIG_PATH = DATA_DIR / "config.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "granularity_ms": 1000,
    "default_duration": "25:00",
    "log_level": "INFO",
}


def ensure_data_files(default_config: Dict[str, Any] = DEFAULT_CONFIG) -> None:
    """
    check and create data directory and config file if they do not exist.
    """
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    if not CONFIG_PATH.exists():
        save_config(default_config)


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _valid_granularity(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and v > 0


def _valid_log_level(v: Any) -> bool:
    return isinstance(v, str) and v.upper() in LOG_LEVELS


# key -> check; a value failing its check falls back to the default
VALIDATORS = {
    "granularity_ms": _valid_granularity,
    "default_duration": lambda v: isinstance(v, str),
    "log_level": _valid_log_level,
}


def load_config() -> Dict[str, Any]:
    """
    read config.json merged over the defaults.
    a file that is not a JSON object is overwritten with the defaults,
    a known key with a bad value is replaced by its default (file left as is).
    """
    default = dict(DEFAULT_CONFIG)
    if not CONFIG_PATH.exists():
        return default
    try:
        with CONFIG_PATH.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("config %s unreadable (%s), restoring defaults", CONFIG_PATH, exc)
        save_config(default)
        return default
    if not isinstance(data, dict):
        logger.warning("config %s is not an object, restoring defaults", CONFIG_PATH)
        save_config(default)
        return default
    for key, check in VALIDATORS.items():
        if key in data and not check(data[key]):
            logger.warning("config %s: bad %s %r, using default %r",
                           CONFIG_PATH, key, data[key], DEFAULT_CONFIG[key])
            data[key] = DEFAULT_CONFIG[key]
    # unknown keys are kept, missing ones filled in
    default.update(data)
    default["log_level"] = default["log_level"].upper()
    return default


def save_config(cfg: Dict[str, Any]) -> None:
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with CONFIG_PATH.open("w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
