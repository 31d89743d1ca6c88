"""
UTIL: Message Store
PURPOSE: Persists the id of the last webhook message we created, so the next run
         edits it instead of posting a new one. One file, one value.
"""

import os
from utils.logger import log_debug


class MessageStore:
    """File-backed holder for a single message id. A missing file means no handle."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> str | None:
        if not os.path.isfile(self.path):
            return None
        with open(self.path, "r", encoding="utf-8") as f:
            message_id = f.read().strip()
        return message_id or None

    def save(self, message_id: str) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(str(message_id))
        os.replace(tmp, self.path)
        log_debug(f"[MessageStore] Saved message id {message_id} → {self.path}")

    def clear(self) -> None:
        try:
            os.remove(self.path)
            log_debug(f"[MessageStore] Cleared {self.path}")
        except FileNotFoundError:
            pass
