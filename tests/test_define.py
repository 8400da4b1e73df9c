import requests
from selfreflect.services import define
from selfreflect.services.define import define_url, lookup_definition


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def test_define_url():
    assert define_url("Melancholy") == "https://www.google.com/search?q=define+Melancholy"
    assert define_url("  bitter sweet ") == "https://www.google.com/search?q=define+bitter+sweet"


def test_define_url_blank():
    assert define_url("") is None
    assert define_url("   ") is None
    assert define_url(None) is None


def test_lookup_definition_first_sense(monkeypatch):
    payload = [{
        "word": "radiant",
        "meanings": [{
            "partOfSpeech": "adjective",
            "definitions": [{"definition": "Sending out light; shining or glowing brightly."}],
        }],
    }]
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return FakeResponse(200, payload)

    monkeypatch.setattr(define.requests, "get", fake_get)
    result = lookup_definition("Radiant")
    assert result == {
        "word": "radiant",
        "part_of_speech": "adjective",
        "definition": "Sending out light; shining or glowing brightly.",
    }
    assert calls[0].endswith("/radiant")


def test_lookup_definition_not_found(monkeypatch):
    monkeypatch.setattr(define.requests, "get", lambda url, timeout: FakeResponse(404, {"title": "No Definitions Found"}))
    assert lookup_definition("zzzz") is None


def test_lookup_definition_network_error(monkeypatch):
    def fail(url, timeout):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(define.requests, "get", fail)
    assert lookup_definition("calm") is None


def test_lookup_definition_bad_json(monkeypatch):
    monkeypatch.setattr(define.requests, "get", lambda url, timeout: FakeResponse(200, ValueError("bad json")))
    assert lookup_definition("calm") is None


def test_lookup_definition_blank_word_skips_request(monkeypatch):
    def never(url, timeout):
        raise AssertionError("should not be called")

    monkeypatch.setattr(define.requests, "get", never)
    assert lookup_definition("  ") is None
