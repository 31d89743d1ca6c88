import json

import pytest

from nodes import horoscope_writer
from nodes.horoscope_writer import HoroscopeFormatError, ZODIAC_SIGNS


def test_prompt_names_the_date_and_every_sign():
    prompt = horoscope_writer.build_prompt("October 19, 2026")
    assert "October 19, 2026" in prompt
    for name, emoji in ZODIAC_SIGNS:
        assert f'"name": "{name}", "emoji": "{emoji}"' in prompt


def test_execute_passes_config_and_stamps_date(monkeypatch, config, horoscope):
    captured = {}

    def fake_completion(**kwargs):
        captured.update(kwargs)
        return {"summary": horoscope["summary"], "signs": horoscope["signs"]}

    monkeypatch.setattr(horoscope_writer, "chat_completion", fake_completion)

    data = horoscope_writer.execute("October 19, 2026", config)

    assert data["date"] == "October 19, 2026"
    assert captured["api_key"] == "test-key"
    assert captured["model"] == config.model
    assert captured["json_mode"] is True


@pytest.mark.parametrize("bad", [
    [],
    {"signs": [{"name": "Aries", "text": "x"}]},
    {"summary": "  ", "signs": [{"name": "Aries", "text": "x"}]},
    {"summary": "ok", "signs": []},
    {"summary": "ok", "signs": [{"name": "Aries"}]},
    {"summary": "ok", "signs": ["Aries"]},
    {"summary": "ok", "signs": [{"name": "Aries/Ram", "text": "x"}]},
    {"summary": "ok", "signs": [{"name": "../ESCAPED", "text": "x"}]},
    {"summary": "ok", "signs": [{"name": "Ophiuchus", "text": "x"}]},
    {"summary": "ok", "signs": [{"name": ["Aries"], "text": "x"}]},
    {"summary": "ok", "signs": [{"name": "Aries", "text": 42}]},
    {"summary": "ok", "signs": [{"name": "Aries", "text": "x"}, {"name": "aries", "text": "y"}]},
])
def test_validate_rejects_malformed(bad):
    with pytest.raises(HoroscopeFormatError):
        horoscope_writer.validate(bad)


def test_validate_canonicalizes_name_and_fills_missing_emoji():
    data = horoscope_writer.validate({"summary": "ok", "signs": [{"name": " leo ", "text": "Roar."}]})
    assert data["signs"][0]["name"] == "Leo"
    assert data["signs"][0]["emoji"] == "♌"


def test_execute_propagates_parse_errors(monkeypatch, config):
    def broken(**kwargs):
        raise json.JSONDecodeError("Expecting value", "", 0)

    monkeypatch.setattr(horoscope_writer, "chat_completion", broken)
    with pytest.raises(json.JSONDecodeError):
        horoscope_writer.execute("October 19, 2026", config)
