"""Steam storefront client: game search and per-app requirement blurbs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config.settings import HTTP_TIMEOUT_S, STEAM_APPDETAILS_URL, STEAM_SEARCH_URL
from ..storage.rate_limit import RateLimiter, Usage
from ..utils.logging import get_logger
from .adapters import SteamRequirements

logger = get_logger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "canirun/0.1 (+requirements checker)",
    "Accept": "application/json",
}


class SourceError(Exception):
    """A requirement source could not be reached or answered badly."""


class GameNotFoundError(SourceError):
    pass


class RateLimitExceededError(SourceError):
    def __init__(self, key: str, usage: Usage):
        super().__init__(f"lookup limit reached for {key!r} ({usage.count} used)")
        self.key = key
        self.usage = usage


@dataclass(frozen=True)
class SearchItem:
    id: int
    name: str
    tiny_image: Optional[str] = None


def build_session(retries: int = 3, backoff: float = 0.5) -> requests.Session:
    session = requests.Session()
    retry = Retry(
        total=retries,
        backoff_factor=backoff,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update(DEFAULT_HEADERS)
    return session


class SteamClient:
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout_s: float = HTTP_TIMEOUT_S,
        rate_limiter: Optional[RateLimiter] = None,
        client_key: str = "local",
    ):
        self.session = session or build_session()
        self.timeout_s = timeout_s
        self.rate_limiter = rate_limiter
        self.client_key = client_key

    def _get_json(self, url: str, params: Dict[str, Any]) -> Any:
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout_s)
        except requests.RequestException as exc:
            logger.warning("Steam request failed: %s", exc)
            raise SourceError(f"Steam request failed: {exc}") from exc
        if resp.status_code != 200:
            logger.warning("Steam answered HTTP %s for %s", resp.status_code, url)
            raise SourceError(f"Steam API error (HTTP {resp.status_code})")
        try:
            return resp.json()
        except ValueError as exc:
            raise SourceError("Steam returned invalid JSON") from exc

    def _consume_quota(self) -> None:
        if self.rate_limiter is None:
            return
        usage = self.rate_limiter.check(self.client_key)
        if usage.exhausted:
            raise RateLimitExceededError(self.client_key, usage)
        self.rate_limiter.increment(self.client_key)

    def search(self, term: str) -> List[SearchItem]:
        if not term or not term.strip():
            return []
        data = self._get_json(STEAM_SEARCH_URL, {"term": term.strip(), "l": "english", "cc": "US"})
        items = []
        raw_items = data.get("items") if isinstance(data, dict) else None
        for raw in raw_items or []:
            try:
                items.append(SearchItem(id=int(raw["id"]), name=str(raw["name"]), tiny_image=raw.get("tiny_image")))
            except (KeyError, TypeError, ValueError):
                logger.debug("Skipping malformed search item: %r", raw)
        logger.info("Steam search %r -> %d results", term, len(items))
        return items

    def requirements(self, appid: int) -> SteamRequirements:
        self._consume_quota()
        key = str(appid)
        data = self._get_json(STEAM_APPDETAILS_URL, {"appids": key})
        app = (data.get(key) if isinstance(data, dict) else None) or {}
        if not app.get("success") or not isinstance(app.get("data"), dict):
            raise GameNotFoundError(f"Steam app {appid} not found")
        reqs = SteamRequirements.from_payload(app["data"])
        logger.info("Fetched requirements for %s (%s)", reqs.name or key, key)
        return reqs
