import json
import os
from typing import Any, Dict

from ghostpen.core import config


def home_dir() -> str:
    os.makedirs(config.GHOSTPEN_HOME, mode=0o700, exist_ok=True)
    return config.GHOSTPEN_HOME


def log_dir() -> str:
    os.makedirs(config.GHOSTPEN_LOG_DIR, mode=0o700, exist_ok=True)
    return config.GHOSTPEN_LOG_DIR


def append_jsonl(path: str, record: Dict[str, Any]) -> None:
    """Open, append one JSON line, close. No handle outlives the call."""
    line = json.dumps(record, ensure_ascii=False, default=str)
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")
