"""
NODE: Horoscope Writer
PURPOSE: Asks the LLM for today's horoscope: a short summary of the overall energy
         plus two sentences for each of the 12 signs, returned as JSON.
INPUT: today's date label, Config (API key + model)
OUTPUT: {summary, signs: [{name, emoji, text}], date}
"""

# ── AI Configuration ─────────────────────────────────────────
TEMPERATURE = 0.9
MAX_TOKENS = 4000

ZODIAC_SIGNS = [
    ("Aries", "♈"),
    ("Taurus", "♉"),
    ("Gemini", "♊"),
    ("Cancer", "♋"),
    ("Leo", "♌"),
    ("Virgo", "♍"),
    ("Libra", "♎"),
    ("Scorpio", "♏"),
    ("Sagittarius", "♐"),
    ("Capricorn", "♑"),
    ("Aquarius", "♒"),
    ("Pisces", "♓"),
]

SYSTEM_MESSAGE = """You are a professional astrologer writing a daily horoscope column.
Output ONLY valid JSON, no commentary and no markdown."""

PROMPT = """Analyze actual planetary transits for {today}.
Write a 2-3 sentence summary of the overall energy.
For EACH of the 12 signs, write exactly TWO sentences.
JSON ONLY: {{
  "summary": "Overall vibe",
  "signs": [
{sign_lines}
  ]
}}"""

# ── Implementation ────────────────────────────────────────────
from utils.config import Config
from utils.openrouter_client import chat_completion
from utils.logger import log_info


class HoroscopeFormatError(ValueError):
    """LLM output parsed as JSON but does not look like a horoscope."""


_SIGN_LOOKUP = {name.lower(): (name, emoji) for name, emoji in ZODIAC_SIGNS}


def build_prompt(today: str) -> str:
    sign_lines = ",\n".join(
        f'    {{"name": "{name}", "emoji": "{emoji}", "text": "Two sentences..."}}'
        for name, emoji in ZODIAC_SIGNS
    )
    return PROMPT.format(today=today, sign_lines=sign_lines)


def validate(data) -> dict:
    """
    Check the parsed response has a summary and a list of known signs with text.

    Sign names are matched case-insensitively against ZODIAC_SIGNS and rewritten
    to their canonical spelling, since they end up in file names. A missing or
    non-string emoji falls back to the sign's glyph.
    """
    if not isinstance(data, dict):
        raise HoroscopeFormatError(f"Expected a JSON object, got {type(data).__name__}")

    summary = data.get("summary")
    if not isinstance(summary, str) or not summary.strip():
        raise HoroscopeFormatError("Missing 'summary'")

    signs = data.get("signs")
    if not isinstance(signs, list) or not signs:
        raise HoroscopeFormatError("Missing 'signs' list")

    seen = set()
    for i, sign in enumerate(signs):
        if not isinstance(sign, dict):
            raise HoroscopeFormatError(f"Sign #{i + 1} is not an object")

        name, text = sign.get("name"), sign.get("text")
        if not isinstance(name, str) or not isinstance(text, str) or not text.strip():
            raise HoroscopeFormatError(f"Sign #{i + 1} is missing 'name' or 'text'")

        key = name.strip().lower()
        if key not in _SIGN_LOOKUP:
            raise HoroscopeFormatError(f"Sign #{i + 1} has unknown name {name!r}")
        if key in seen:
            raise HoroscopeFormatError(f"Sign {name!r} appears twice")
        seen.add(key)

        canonical, glyph = _SIGN_LOOKUP[key]
        sign["name"] = canonical
        if not isinstance(sign.get("emoji"), str):
            sign["emoji"] = glyph

    return data


def execute(today: str, config: Config) -> dict:
    """
    Generate today's horoscope.

    Raises:
        HoroscopeFormatError: response is JSON but not a usable horoscope
        json.JSONDecodeError / requests.RequestException: from the client, after retries
    """
    result = chat_completion(
        prompt=build_prompt(today),
        system_message=SYSTEM_MESSAGE,
        model=config.model,
        api_key=config.openrouter_api_key,
        temperature=TEMPERATURE,
        max_tokens=MAX_TOKENS,
        json_mode=True,
    )

    data = validate(result)
    data["date"] = today

    log_info(f"[Writer] ✓ Horoscope for {today}: {len(data['signs'])} signs")
    return data


# ── Standalone test ──────────────────────────────────────────
if __name__ == "__main__":
    print(build_prompt("October 19, 2026"))
