"""Async client for the Hacker News (Algolia) search endpoint."""

from typing import Any, List, Optional
from urllib.parse import quote

import httpx

from hacker_stories.exceptions import FetchError
from hacker_stories.models import Item
from hacker_stories.utils.config import settings
from hacker_stories.utils.logger import get_logger

log = get_logger(__name__)

HITS_FIELD = "hits"
_UNSET = object()


def build_search_url(query: str, endpoint: str | None = None) -> str:
    """Append the percent-encoded *query* to the endpoint prefix."""
    return f"{endpoint or settings.api_endpoint}{quote(query, safe='')}"


def parse_hits(payload: Any) -> List[Item]:
    """Turn a decoded response body into Items.

    A body without ``hits`` counts as an empty result set; a body that is not
    an object, or a ``hits`` that is not a list, raises ``ValueError``.
    """
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    hits = payload.get(HITS_FIELD)
    if hits is None:
        log.warning("Response has no %r field; treating it as empty", HITS_FIELD)
        return []
    if not isinstance(hits, list):
        raise ValueError(f"{HITS_FIELD!r} is {type(hits).__name__}, not a list")

    items: List[Item] = []
    for hit in hits:
        if not isinstance(hit, dict):
            log.debug("Skipping non-object hit: %r", hit)
            continue
        items.append(Item.from_hit(hit))
    return items


class StoriesClient:
    """Performs the GET for a committed search target.

    Every failure -- transport, non-2xx status, undecodable or malformed
    body -- is raised as ``FetchError`` so callers see a single outcome.
    """

    def __init__(self, http: httpx.AsyncClient | None = None, timeout: Any = _UNSET):
        self._owns_http = http is None
        if http is None:
            http = httpx.AsyncClient(
                timeout=settings.http_timeout if timeout is _UNSET else timeout,
                follow_redirects=True,
            )
        self._http = http

    async def fetch_stories(self, url: str) -> List[Item]:
        """GET *url* and return the parsed stories."""
        try:
            resp = await self._http.get(url)
            resp.raise_for_status()
            items = parse_hits(resp.json())
        except httpx.HTTPError as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError too
            raise FetchError(url, f"bad payload: {exc}") from exc
        log.info("Fetched %d stories from %s", len(items), url)
        return items

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "StoriesClient":
        return self

    async def __aexit__(self, *exc_info: Optional[Any]) -> None:
        await self.aclose()
