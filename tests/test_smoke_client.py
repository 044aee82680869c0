import pytest
import requests

import smoke_client


class FakeResponse:
    def __init__(self, payload):
        self.payload = payload

    def raise_for_status(self):
        pass

    def json(self):
        return self.payload


PAYLOAD = {
    "term": "go",
    "total": 1,
    "items": [{"name": "Gophers", "description": "", "url": "http://x", "tags": ["go", "systems"]}],
}


@pytest.fixture
def calls(monkeypatch):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append((url, params))
        return FakeResponse(PAYLOAD)

    monkeypatch.setattr(smoke_client.requests, "get", fake_get)
    return calls


def test_fetch_groups(calls):
    assert smoke_client.fetch_groups("http://api", "go") == PAYLOAD
    assert calls == [("http://api/api/groups", {"term": "go"})]


def test_fetch_groups_without_term(calls):
    smoke_client.fetch_groups("http://api")
    assert calls == [("http://api/api/groups", None)]


def test_main_prints_groups(calls, monkeypatch, capsys):
    monkeypatch.setenv("API_URL", "http://api/")
    monkeypatch.setattr(smoke_client.sys, "argv", ["smoke_client.py", "tag:go"])

    assert smoke_client.main() == 0

    out = capsys.readouterr().out
    assert calls == [("http://api/api/groups", {"term": "tag:go"})]
    assert "Found 1 groups" in out
    assert "- Gophers [go, systems]" in out


def test_main_reports_connection_error(monkeypatch, capsys):
    def failing_get(url, params=None, timeout=None):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(smoke_client.requests, "get", failing_get)
    monkeypatch.setattr(smoke_client.sys, "argv", ["smoke_client.py"])

    assert smoke_client.main() == 1
    assert "Critical error: refused" in capsys.readouterr().out
