"""Search controller -- draft query, committed target and the fetch trigger.

  on_draft_change -> PersistedValue("search")           (no fetch)
  on_submit       -> committed url changes -> fetch cycle
  __init__        -> committed url from the restored draft -> fetch cycle
  on_dismiss      -> REMOVE_ITEM                        (no fetch)

A fetch cycle dispatches FETCH_INIT synchronously, then runs the GET as an
asyncio task that resolves into FETCH_SUCCESS or FETCH_FAILURE.  Each cycle
carries a generation number and only the newest generation may resolve.
"""

import asyncio
from dataclasses import dataclass
from typing import Callable, List, Optional, Set, Tuple

from hacker_stories.exceptions import FetchError
from hacker_stories.models import Item, ResultState
from hacker_stories.state.persisted import PersistedValue
from hacker_stories.state.reducer import (
    FetchLifecycleStore,
    fetch_failure,
    fetch_init,
    fetch_success,
    remove_item,
    stories_reducer,
)
from hacker_stories.storage.base import Storage
from hacker_stories.utils.config import settings
from hacker_stories.utils.logger import get_logger
from hacker_stories.web.client import StoriesClient, build_search_url

log = get_logger(__name__)


@dataclass(frozen=True)
class SearchView:
    """Everything the presentation layer needs to render one frame."""

    draft_query: str
    is_loading: bool
    is_error: bool
    visible_items: Tuple[Item, ...]
    can_submit: bool


ViewListener = Callable[[SearchView], None]


def filter_items(items, query: str) -> Tuple[Item, ...]:
    """Items whose title contains *query*, case-insensitively."""
    needle = query.lower()
    return tuple(item for item in items if needle in item.title.lower())


class SearchController:
    """Owns the search screen's state.  Construct it inside a running event loop."""

    def __init__(
        self,
        storage: Storage,
        client: StoriesClient | None = None,
        endpoint: str | None = None,
        default_query: str | None = None,
        storage_key: str | None = None,
        initial_state: ResultState | None = None,
    ):
        self._client = client or StoriesClient()
        self._owns_client = client is None
        self._endpoint = endpoint or settings.api_endpoint
        self._query = PersistedValue(
            storage,
            storage_key or settings.search_storage_key,
            settings.default_query if default_query is None else default_query,
        )
        self._store = FetchLifecycleStore(stories_reducer, initial_state)
        self._listeners: List[ViewListener] = []
        self._store.subscribe(lambda _state: self._notify())

        self._pending: Set[asyncio.Task] = set()
        self._generation = 0
        self._committed_query: Optional[str] = None
        self._committed_url: Optional[str] = None

        # Implicit first search with whatever query was restored.
        self._commit(self._query.value)

    # -- Read side ----------------------------------------------------------

    @property
    def state(self) -> ResultState:
        return self._store.state

    @property
    def committed_url(self) -> Optional[str]:
        return self._committed_url

    @property
    def draft_query(self) -> str:
        return self._query.value

    def current_view(self) -> SearchView:
        draft = self._query.value
        state = self._store.state
        return SearchView(
            draft_query=draft,
            is_loading=state.is_loading,
            is_error=state.is_error,
            visible_items=filter_items(state.data, draft),
            can_submit=bool(draft),
        )

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """Call *listener* with a fresh view after every change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- Intents ------------------------------------------------------------

    def on_draft_change(self, text: str) -> None:
        self._query.set(text)
        self._notify()

    def on_submit(self) -> None:
        draft = self._query.value
        if not draft:
            log.debug("Submit ignored: empty query")
            return
        if self._commit(draft):
            return
        if self._store.state.is_error:
            # Same target as the failed request: resubmitting retries it.
            log.info("Retrying %s", self._committed_url)
            self._handle_fetch_stories()

    def on_dismiss(self, item: Item) -> None:
        self._store.dispatch(remove_item(item))

    # -- Lifecycle ----------------------------------------------------------

    async def settle(self) -> None:
        """Wait until every outstanding fetch has resolved."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    async def aclose(self) -> None:
        """Unmount: drop outstanding fetches and release the HTTP client."""
        for task in list(self._pending):
            task.cancel()
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
        self._listeners.clear()
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "SearchController":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # -- Internals ----------------------------------------------------------

    def _commit(self, query: str) -> bool:
        """Set the committed target; return False when it did not change."""
        url = build_search_url(query, self._endpoint)
        if url == self._committed_url:
            return False
        self._committed_query = query
        self._committed_url = url
        self._handle_fetch_stories()
        return True

    def _handle_fetch_stories(self) -> None:
        if not self._committed_query:
            return
        self._generation += 1
        self._store.dispatch(fetch_init())
        task = asyncio.get_running_loop().create_task(
            self._fetch(self._committed_url, self._generation)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _fetch(self, url: str, generation: int) -> None:
        log.info("Searching %s", url)
        try:
            items = await self._client.fetch_stories(url)
        except FetchError as exc:
            if self._is_stale(generation, url):
                return
            log.warning("%s", exc)
            self._store.dispatch(fetch_failure())
            return
        if self._is_stale(generation, url):
            return
        self._store.dispatch(fetch_success(items))

    def _is_stale(self, generation: int, url: str) -> bool:
        if generation == self._generation:
            return False
        log.debug("Discarding superseded response for %s", url)
        return True

    def _notify(self) -> None:
        if not self._listeners:
            return
        view = self.current_view()
        for listener in list(self._listeners):
            listener(view)
