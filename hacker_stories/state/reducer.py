"""Fetch-lifecycle reducer and the store that drives it.

Transitions:

  FETCH_INIT     -> is_loading=True,  is_error=False, data kept
  FETCH_SUCCESS  -> is_loading=False, is_error=False, data replaced
  FETCH_FAILURE  -> is_loading=False, is_error=True,  data kept
  REMOVE_ITEM    -> data minus every entry sharing the item's id
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, List

from hacker_stories.exceptions import UnknownActionError
from hacker_stories.models import ResultState
from hacker_stories.utils.logger import get_logger

log = get_logger(__name__)


class ActionType(str, Enum):
    FETCH_INIT = "STORIES_FETCH_INIT"
    FETCH_SUCCESS = "STORIES_FETCH_SUCCESS"
    FETCH_FAILURE = "STORIES_FETCH_FAILURE"
    REMOVE_ITEM = "REMOVE_STORY"


@dataclass(frozen=True)
class Action:
    type: ActionType
    payload: Any = None


def fetch_init() -> Action:
    return Action(ActionType.FETCH_INIT)


def fetch_success(items) -> Action:
    return Action(ActionType.FETCH_SUCCESS, tuple(items))


def fetch_failure() -> Action:
    return Action(ActionType.FETCH_FAILURE)


def remove_item(item) -> Action:
    return Action(ActionType.REMOVE_ITEM, item)


def stories_reducer(state: ResultState, action: Action) -> ResultState:
    """Pure transition function -- no I/O, never issues the fetch itself."""
    kind = action.type
    if kind == ActionType.FETCH_INIT:
        return replace(state, is_loading=True, is_error=False)
    if kind == ActionType.FETCH_SUCCESS:
        return replace(state, is_loading=False, is_error=False, data=tuple(action.payload))
    if kind == ActionType.FETCH_FAILURE:
        # Stale-on-error: the previous result set stays visible.
        return replace(state, is_loading=False, is_error=True)
    if kind == ActionType.REMOVE_ITEM:
        target = action.payload.id
        return replace(state, data=tuple(item for item in state.data if item.id != target))
    raise UnknownActionError(f"Unknown action type: {kind!r}")


Reducer = Callable[[ResultState, Action], ResultState]
Listener = Callable[[ResultState], None]


class FetchLifecycleStore:
    """Holds the current ``ResultState`` and applies actions through a reducer."""

    def __init__(self, reducer: Reducer = stories_reducer, initial: ResultState | None = None):
        self._reducer = reducer
        self._state = initial if initial is not None else ResultState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> ResultState:
        return self._state

    def dispatch(self, action: Action) -> ResultState:
        """Apply *action*, notify listeners, and return the new state."""
        self._state = self._reducer(self._state, action)
        log.debug(
            "%s -> loading=%s error=%s items=%d",
            getattr(action.type, "name", action.type),
            self._state.is_loading,
            self._state.is_error,
            len(self._state.data),
        )
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
