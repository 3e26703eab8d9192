"""Motivational tip and quote with local fallbacks.

Both sources are fetched independently. Any failure (network, status code,
bad JSON, missing field) resolves to a random pick from a fixed local list,
so callers always get displayable text.
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Optional

import requests

from nospend.domain.errors import FeedFetchError

logger = logging.getLogger(__name__)

ADVICE_URL = "https://api.adviceslip.com/advice"
QUOTE_URL = "https://api.quotable.io/random"
DEFAULT_TIMEOUT = 5.0

FALLBACK_TIPS = [
    "Hold fokus – hver krone tæller.",
    "Planlæg dine måltider for at undgå impulskøb.",
    "Gem kvitteringer og gennemgå dem regelmæssigt.",
    "Fejre små sejre holder dig motiveret.",
]

FALLBACK_QUOTES = [
    "Sparsommelighed er en dyd.",
    "Hver krone sparet er en krone tjent.",
    "Disciplin er nøglen til finansiel frihed.",
    "Små besparelser bliver til store resultater.",
]


@dataclass(frozen=True)
class Motivation:
    """Text to display and whether it came from the local fallback list."""

    text: str
    is_fallback: bool = False


class MotivationFeed:
    """Fetches a tip and a quote from public JSON endpoints."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        rng: Optional[random.Random] = None,
        timeout: float = DEFAULT_TIMEOUT,
        offline: bool = False,
        advice_url: str = ADVICE_URL,
        quote_url: str = QUOTE_URL,
    ):
        """Initialize feed.

        Args:
            session: HTTP session owned by the caller. If None, every request
                opens and closes its own requests.Session, so the two
                concurrent fetches never share one
            rng: Random source for fallback selection; seed it for repeatable output
            timeout: Per-request timeout in seconds
            offline: Skip HTTP entirely and always use fallbacks
            advice_url: Tip endpoint
            quote_url: Quote endpoint
        """
        self.session = session
        self.rng = rng or random.Random()
        self.timeout = timeout
        self.offline = offline
        self.advice_url = advice_url
        self.quote_url = quote_url

    def _get_json(self, url: str) -> dict[str, Any]:
        if self.offline:
            raise FeedFetchError("offline mode")
        if self.session is not None:
            return self._request(self.session, url)
        with requests.Session() as session:
            return self._request(session, url)

    def _request(self, session: requests.Session, url: str) -> dict[str, Any]:
        try:
            response = session.get(
                url, timeout=self.timeout, headers={"Accept": "application/json"}
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise FeedFetchError(f"{url}: {e}") from e
        if not isinstance(data, dict):
            raise FeedFetchError(f"{url}: unexpected payload")
        return data

    def fetch_tip_text(self) -> str:
        """Fetch the tip from the advice endpoint.

        Raises:
            FeedFetchError: If the request fails or the field is missing
        """
        data = self._get_json(self.advice_url)
        slip = data.get("slip")
        advice = slip.get("advice") if isinstance(slip, dict) else None
        if not isinstance(advice, str) or not advice.strip():
            raise FeedFetchError(f"{self.advice_url}: missing 'slip.advice'")
        return advice.strip()

    def fetch_quote_text(self) -> str:
        """Fetch a quote and compose it as '"<quote>" - <author>'.

        Raises:
            FeedFetchError: If the request fails or the field is missing
        """
        data = self._get_json(self.quote_url)
        content = data.get("content")
        if not isinstance(content, str) or not content.strip():
            raise FeedFetchError(f"{self.quote_url}: missing 'content'")
        author = data.get("author") or "Ukendt"
        return f'"{content.strip()}" - {author}'

    def _resolve(
        self, result: str | FeedFetchError, fallbacks: list[str], label: str
    ) -> Motivation:
        if isinstance(result, FeedFetchError):
            logger.warning("%s unavailable, using fallback: %s", label, result)
            return Motivation(text=self.rng.choice(fallbacks), is_fallback=True)
        return Motivation(text=result)

    @staticmethod
    def _attempt(fetch: Callable[[], str]) -> str | FeedFetchError:
        try:
            return fetch()
        except FeedFetchError as e:
            return e

    def fetch_tip(self) -> Motivation:
        """Return a tip, falling back to a local one on failure."""
        return self._resolve(self._attempt(self.fetch_tip_text), FALLBACK_TIPS, "Tip")

    def fetch_quote(self) -> Motivation:
        """Return a quote, falling back to a local one on failure."""
        return self._resolve(self._attempt(self.fetch_quote_text), FALLBACK_QUOTES, "Quote")

    async def fetch_all(self) -> tuple[Motivation, Motivation]:
        """Fetch tip and quote concurrently.

        Fallbacks are picked after both requests finish, tip first, so a
        seeded random source gives the same output on every run.
        """
        tip_result, quote_result = await asyncio.gather(
            asyncio.to_thread(self._attempt, self.fetch_tip_text),
            asyncio.to_thread(self._attempt, self.fetch_quote_text),
        )
        return (
            self._resolve(tip_result, FALLBACK_TIPS, "Tip"),
            self._resolve(quote_result, FALLBACK_QUOTES, "Quote"),
        )


def fetch_motivation(feed: MotivationFeed) -> tuple[Motivation, Motivation]:
    """Run ``feed.fetch_all`` from synchronous code."""
    return asyncio.run(feed.fetch_all())
