"""
NODE: Post to Discord
PURPOSE: Publishes the rendered horoscope to a Discord webhook. First run creates a
         message and remembers its id; later runs edit that same message in place.
INPUT: PublishTarget (base webhook URL + optional thread), payload dict
OUTPUT: PublishResult {action, ok, status_code, message_id, handle_cleared, error}

Handle lifecycle (message_id.txt):
  no file    → POST {base}?[thread_id=..&]wait=true → save returned id
  id on file → PATCH {base}/messages/{id}[?thread_id=..]
  PATCH 404/400 → message gone or id rejected → delete file, next run creates again
  anything else → report failure, leave the file alone
"""

from dataclasses import dataclass

import requests

from utils.logger import log_info, log_error, log_warning, log_debug
from utils.message_store import MessageStore
from utils.webhook_url import PublishTarget, build_request_url, parse_target

REQUEST_TIMEOUT = 30  # seconds

# Statuses meaning the stored message id is stale or malformed
RESET_STATUSES = {400, 404}


@dataclass
class PublishResult:
    action: str  # "create" or "edit"
    ok: bool
    status_code: int
    message_id: str | None = None
    handle_cleared: bool = False
    error: str = ""


class WebhookPublisher:
    """Create-or-edit publisher backed by a MessageStore."""

    def __init__(self, store: MessageStore, session: requests.Session | None = None,
                 timeout: int = REQUEST_TIMEOUT):
        self.store = store
        self.session = session or requests.Session()
        self.timeout = timeout

    def publish(self, target: PublishTarget, payload: dict) -> PublishResult:
        """
        Send payload to the webhook, creating or editing depending on the stored id.

        Raises:
            requests.RequestException: on transport failure (no status to classify).
                Stored state is not touched.
        """
        message_id = self.store.load()

        if message_id:
            return self._edit(target, payload, message_id)
        return self._create(target, payload)

    # ── Create ───────────────────────────────────────────────

    def _create(self, target: PublishTarget, payload: dict) -> PublishResult:
        url = build_request_url(target.base_url, thread_id=target.thread_id, wait=True)
        log_info("[Discord] Sending new message...")
        log_debug(f"[Discord] POST {url}")

        resp = self.session.post(url, json=payload, timeout=self.timeout)

        if not resp.ok:
            log_error(f"[Discord] Error: {resp.status_code} {resp.text}")
            return PublishResult("create", ok=False, status_code=resp.status_code, error=resp.text)

        new_id = self._extract_id(resp)
        if not new_id:
            log_warning("[Discord] Message created but no id returned, next run will post again")
            return PublishResult("create", ok=True, status_code=resp.status_code)

        self.store.save(new_id)
        log_info(f"[Discord] ✓ First post successful. ID saved ({new_id})")
        return PublishResult("create", ok=True, status_code=resp.status_code, message_id=new_id)

    @staticmethod
    def _extract_id(resp: requests.Response) -> str | None:
        try:
            data = resp.json()
        except ValueError:
            return None
        if not isinstance(data, dict) or data.get("id") in (None, ""):
            return None
        return str(data["id"])

    # ── Edit ─────────────────────────────────────────────────

    def _edit(self, target: PublishTarget, payload: dict, message_id: str) -> PublishResult:
        url = build_request_url(target.base_url, thread_id=target.thread_id, message_id=message_id)
        log_info(f"[Discord] Attempting to edit message {message_id}...")
        log_debug(f"[Discord] PATCH {url}")

        resp = self.session.patch(url, json=payload, timeout=self.timeout)

        if resp.ok:
            log_info("[Discord] ✓ Existing message updated successfully")
            return PublishResult("edit", ok=True, status_code=resp.status_code, message_id=message_id)

        log_error(f"[Discord] Error: {resp.status_code} {resp.text}")

        if resp.status_code in RESET_STATUSES:
            log_info("[Discord] Cleaning up ID file to reset for next run")
            self.store.clear()
            return PublishResult(
                "edit",
                ok=False,
                status_code=resp.status_code,
                handle_cleared=True,
                error=resp.text,
            )

        return PublishResult(
            "edit", ok=False, status_code=resp.status_code, message_id=message_id, error=resp.text
        )


def execute(webhook_url: str, message_id_path: str, payload: dict,
            session: requests.Session | None = None) -> PublishResult:
    """Publish payload to webhook_url, keeping the message handle in message_id_path."""
    target = parse_target(webhook_url)
    publisher = WebhookPublisher(MessageStore(message_id_path), session=session)
    return publisher.publish(target, payload)
