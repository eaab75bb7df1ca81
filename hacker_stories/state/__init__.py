"""State module -- fetch-lifecycle reducer, persisted values, search controller."""

from hacker_stories.state.controller import SearchController, SearchView
from hacker_stories.models import Item, ResultState
from hacker_stories.state.persisted import PersistedValue
from hacker_stories.state.reducer import (
    Action,
    ActionType,
    FetchLifecycleStore,
    stories_reducer,
)

__all__ = [
    "Action",
    "ActionType",
    "FetchLifecycleStore",
    "Item",
    "PersistedValue",
    "ResultState",
    "SearchController",
    "SearchView",
    "stories_reducer",
]
