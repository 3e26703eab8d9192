"""Tests for the motivational tip and quote feed."""

import random

import pytest
import requests

from nospend.domain.motivation import (
    ADVICE_URL,
    FALLBACK_QUOTES,
    FALLBACK_TIPS,
    QUOTE_URL,
    MotivationFeed,
    fetch_motivation,
)


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, bad_json=False):
        self.payload = payload
        self.status_code = status_code
        self.bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self.bad_json:
            raise ValueError("Expecting value")
        return self.payload


class FakeSession:
    """Session returning canned responses (or raising) per URL."""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def get(self, url, timeout=None, headers=None):
        self.calls.append((url, timeout, headers))
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response


def _feed(responses, seed=7, **kwargs):
    return MotivationFeed(session=FakeSession(responses), rng=random.Random(seed), **kwargs)


def test_tip_from_api():
    feed = _feed({ADVICE_URL: FakeResponse({"slip": {"id": 1, "advice": "Save first."}})})
    tip = feed.fetch_tip()
    assert tip.text == "Save first."
    assert tip.is_fallback is False


def test_quote_is_composed_with_author():
    feed = _feed({QUOTE_URL: FakeResponse({"content": "Less is more.", "author": "Mies"})})
    quote = feed.fetch_quote()
    assert quote.text == '"Less is more." - Mies'
    assert quote.is_fallback is False


def test_request_uses_timeout_and_json_header():
    session = FakeSession({ADVICE_URL: FakeResponse({"slip": {"advice": "x"}})})
    MotivationFeed(session=session, timeout=2.5).fetch_tip()
    url, timeout, headers = session.calls[0]
    assert url == ADVICE_URL
    assert timeout == 2.5
    assert headers == {"Accept": "application/json"}


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(status_code=503),
        FakeResponse(bad_json=True),
        FakeResponse({"slip": {}}),
        FakeResponse({"message": "nope"}),
        FakeResponse(["not", "a", "dict"]),
        requests.ConnectionError("unreachable"),
        requests.Timeout("slow"),
    ],
)
def test_tip_failures_use_fallback(response):
    tip = _feed({ADVICE_URL: response}).fetch_tip()
    assert tip.is_fallback is True
    assert tip.text in FALLBACK_TIPS


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(status_code=404),
        FakeResponse({"author": "Nobody"}),
        FakeResponse({"content": "   "}),
        requests.ConnectionError("unreachable"),
    ],
)
def test_quote_failures_use_fallback(response):
    quote = _feed({QUOTE_URL: response}).fetch_quote()
    assert quote.is_fallback is True
    assert quote.text in FALLBACK_QUOTES


def test_seeded_fallback_is_deterministic():
    expected = random.Random(3).choice(FALLBACK_TIPS)
    feed = _feed({ADVICE_URL: requests.ConnectionError()}, seed=3)
    assert feed.fetch_tip().text == expected


def test_offline_never_calls_session():
    session = FakeSession({})
    feed = MotivationFeed(session=session, rng=random.Random(1), offline=True)
    assert feed.fetch_tip().is_fallback is True
    assert feed.fetch_quote().is_fallback is True
    assert session.calls == []


def test_fetch_all_sources_are_independent():
    feed = _feed(
        {
            ADVICE_URL: requests.ConnectionError("down"),
            QUOTE_URL: FakeResponse({"content": "Keep going.", "author": "Ada"}),
        }
    )
    tip, quote = fetch_motivation(feed)
    assert tip.is_fallback is True
    assert quote.text == '"Keep going." - Ada'


def test_fetch_all_fallbacks_are_deterministic_with_seed():
    rng = random.Random(11)
    expected = (rng.choice(FALLBACK_TIPS), rng.choice(FALLBACK_QUOTES))

    feed = MotivationFeed(session=FakeSession({}), rng=random.Random(11), offline=True)
    tip, quote = fetch_motivation(feed)

    assert (tip.text, quote.text) == expected


class ClosingSession(FakeSession):
    """FakeSession usable as a context manager that records closing."""

    created = []

    def __init__(self):
        super().__init__(
            {
                ADVICE_URL: FakeResponse({"slip": {"advice": "Spend less."}}),
                QUOTE_URL: FakeResponse({"content": "Enough.", "author": "Kim"}),
            }
        )
        self.closed = False
        ClosingSession.created.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True


def test_default_sessions_are_per_request_and_closed(monkeypatch):
    ClosingSession.created = []
    monkeypatch.setattr("nospend.domain.motivation.requests.Session", ClosingSession)

    tip, quote = fetch_motivation(MotivationFeed(rng=random.Random(1)))

    assert tip.text == "Spend less."
    assert quote.text == '"Enough." - Kim'
    assert len(ClosingSession.created) == 2
    assert all(len(s.calls) == 1 for s in ClosingSession.created)
    assert all(s.closed for s in ClosingSession.created)
