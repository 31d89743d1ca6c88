"""
NODE: Render Embeds
PURPOSE: Turns the horoscope dict into a Discord webhook body: one header embed
         with the overall energy, then the signs.
INPUT: {summary, signs, date}
OUTPUT: {"embeds": [...]}

Discord limits per message: 10 embeds, 25 fields per embed, 6000 characters
across all titles, descriptions and field names/values. 12 signs can't each get
their own embed, so they go in as fields, spread over as many embeds as the
field cap needs. Sign texts share whatever character budget the header leaves.
An oversized payload is rejected with a 400, which on an edit would also drop
the stored message id.
"""

from utils.config import EMBED_COLOR
from utils.logger import log_debug, log_warning

MAX_EMBEDS = 10
MAX_FIELDS = 25
MAX_TOTAL_CHARS = 6000
MAX_TITLE = 256
MAX_FIELD_VALUE = 1024
MAX_DESCRIPTION = 4096


def _truncate(text: str, limit: int) -> str:
    if limit <= 0:
        return ""
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"


def _sign_title(sign: dict) -> str:
    return _truncate(f"{sign.get('emoji', '')} {sign['name'].upper()}".strip(), MAX_TITLE)


def embed_chars(embed: dict) -> int:
    """Characters Discord counts toward the per-message total."""
    total = len(embed.get("title", "")) + len(embed.get("description", ""))
    for field in embed.get("fields", []):
        total += len(field["name"]) + len(field["value"])
    return total


def build_payload(horoscope: dict) -> dict:
    header = {
        "title": _truncate(f"DAILY HOROSCOPE - {horoscope['date']}", MAX_TITLE),
        "description": _truncate(f"**Current Cosmic Energy:** {horoscope['summary']}", MAX_DESCRIPTION),
        "color": EMBED_COLOR,
    }
    embeds = [header]

    signs = horoscope.get("signs", [])
    max_signs = (MAX_EMBEDS - 1) * MAX_FIELDS
    if len(signs) > max_signs:
        log_warning(f"[Render] {len(signs)} signs, only the first {max_signs} fit in one message")
        signs = signs[:max_signs]

    if signs:
        titles = [_sign_title(sign) for sign in signs]
        budget = MAX_TOTAL_CHARS - embed_chars(header) - sum(len(t) for t in titles)
        per_sign = min(MAX_FIELD_VALUE, max(budget, 0) // len(signs))

        fields = [
            {"name": title, "value": _truncate(sign["text"], per_sign) or "…", "inline": False}
            for title, sign in zip(titles, signs)
        ]
        for start in range(0, len(fields), MAX_FIELDS):
            embeds.append({"color": EMBED_COLOR, "fields": fields[start:start + MAX_FIELDS]})

    log_debug(f"[Render] {len(embeds)} embed(s), {sum(embed_chars(e) for e in embeds)} chars")
    return {"embeds": embeds}
