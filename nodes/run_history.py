"""
NODE: Run History
PURPOSE: "Already ran today" gate. Keeps a short newest-first list of publish dates
         in horoscope_history.json and skips the run if today is already at the head.
INPUT: history file path, today's date label (e.g. "October 19, 2026")
OUTPUT: list of {"date": str} entries / bool
"""

import json
import os

from utils.config import HISTORY_LIMIT
from utils.logger import log_warning


def load_history(path: str) -> list:
    """Read the history list. Missing or unreadable history counts as empty (fail-open)."""
    if not os.path.isfile(path):
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            history = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        log_warning(f"[History] Could not read {path}, starting fresh: {e}")
        return []

    if not isinstance(history, list):
        log_warning(f"[History] {path} is not a list, starting fresh")
        return []
    return history


def already_ran(history: list, today: str) -> bool:
    if not history:
        return False
    head = history[0]
    return isinstance(head, dict) and head.get("date") == today


def record_run(path: str, history: list, today: str) -> list:
    """Prepend today's entry, trim to HISTORY_LIMIT and write the file."""
    updated = [{"date": today}] + list(history)
    updated = updated[:HISTORY_LIMIT]

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(updated, f, indent=2, ensure_ascii=False)
    return updated
