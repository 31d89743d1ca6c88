"""
UTIL: Webhook URL builder
PURPOSE: Splits a configured webhook URL into a PublishTarget (base + optional thread)
         and rebuilds request URLs for create/edit calls. Every request URL the
         publisher issues goes through build_request_url.
"""

from dataclasses import dataclass
from urllib.parse import parse_qs, quote, urlencode, urlsplit, urlunsplit

THREAD_PARAM = "thread_id"
WAIT_PARAM = "wait"


@dataclass(frozen=True)
class PublishTarget:
    base_url: str
    thread_id: str | None = None


def parse_target(webhook_url: str) -> PublishTarget:
    """
    Parse a webhook URL into its base endpoint and thread qualifier.

    Only ``thread_id`` survives from the query string; anything else the
    caller put there (including a stray ``wait``) is dropped, since the
    publisher decides those parameters per request.

    Raises:
        ValueError: if the URL has no scheme or host.
    """
    parts = urlsplit(webhook_url.strip())
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Invalid webhook URL: {webhook_url!r}")

    thread_values = parse_qs(parts.query).get(THREAD_PARAM)
    thread_id = thread_values[0] if thread_values else None

    base_url = urlunsplit((parts.scheme, parts.netloc, parts.path.rstrip("/"), "", ""))
    return PublishTarget(base_url=base_url, thread_id=thread_id or None)


def build_request_url(
    base_url: str,
    thread_id: str | None = None,
    message_id: str | None = None,
    wait: bool = False,
) -> str:
    """
    Build the canonical request URL.

    Args:
        base_url: Webhook endpoint without query string
        thread_id: Thread qualifier, re-attached on every request
        message_id: Previously created message; adds /messages/<id>
        wait: Ask the server to return the created message (create only)

    Returns:
        e.g. https://chat.example/hook/ABC/messages/555?thread_id=99
    """
    url = base_url.rstrip("/")
    if message_id:
        url = f"{url}/messages/{quote(str(message_id), safe='')}"

    params = []
    if thread_id:
        params.append((THREAD_PARAM, thread_id))
    if wait:
        params.append((WAIT_PARAM, "true"))

    if not params:
        return url
    return f"{url}?{urlencode(params)}"
