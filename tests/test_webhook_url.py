import pytest

from utils.webhook_url import PublishTarget, build_request_url, parse_target


def test_parse_target_extracts_thread_id():
    target = parse_target("https://chat.example/hook/ABC?thread_id=99")
    assert target == PublishTarget("https://chat.example/hook/ABC", "99")


def test_parse_target_without_query():
    target = parse_target("https://chat.example/hook/ABC")
    assert target.base_url == "https://chat.example/hook/ABC"
    assert target.thread_id is None


def test_parse_target_drops_other_params_and_trailing_slash():
    target = parse_target("https://chat.example/hook/ABC/?wait=false&thread_id=7&foo=bar")
    assert target.base_url == "https://chat.example/hook/ABC"
    assert target.thread_id == "7"


def test_parse_target_empty_thread_is_none():
    assert parse_target("https://chat.example/hook/ABC?thread_id=").thread_id is None


@pytest.mark.parametrize("url", ["", "not a url", "/hook/ABC"])
def test_parse_target_rejects_invalid(url):
    with pytest.raises(ValueError):
        parse_target(url)


def test_create_url_with_thread_keeps_thread_before_wait():
    url = build_request_url("https://chat.example/hook/ABC", thread_id="99", wait=True)
    assert url == "https://chat.example/hook/ABC?thread_id=99&wait=true"


def test_create_url_without_thread():
    url = build_request_url("https://chat.example/hook/ABC", wait=True)
    assert url == "https://chat.example/hook/ABC?wait=true"


def test_edit_url_with_thread_has_no_wait():
    url = build_request_url("https://chat.example/hook/ABC", thread_id="99", message_id="555")
    assert url == "https://chat.example/hook/ABC/messages/555?thread_id=99"


def test_edit_url_without_params_has_no_question_mark():
    url = build_request_url("https://chat.example/hook/ABC/", message_id="555")
    assert url == "https://chat.example/hook/ABC/messages/555"
    assert "?" not in url
    assert "//messages" not in url


@pytest.mark.parametrize("message_id, expected", [
    ("5?wait=true", "https://chat.example/hook/ABC/messages/5%3Fwait%3Dtrue?thread_id=99"),
    ("../../other", "https://chat.example/hook/ABC/messages/..%2F..%2Fother?thread_id=99"),
])
def test_edit_url_escapes_message_id(message_id, expected):
    url = build_request_url("https://chat.example/hook/ABC", thread_id="99", message_id=message_id)
    assert url == expected
