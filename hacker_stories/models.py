"""Data model shared by the reducer, controller and web client."""

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Optional, Tuple


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class Item:
    """A single story in a result set.  Identity is ``id``."""

    title: str
    url: str
    author: str
    comment_count: int
    score: int
    id: Optional[Hashable]

    @classmethod
    def from_hit(cls, hit: Dict[str, Any]) -> "Item":
        """Normalise an Algolia ``hits`` record (missing/null fields default)."""
        return cls(
            title=_as_str(hit.get("title")),
            url=_as_str(hit.get("url")),
            author=_as_str(hit.get("author")),
            comment_count=max(0, _as_int(hit.get("num_comments"))),
            score=_as_int(hit.get("points")),
            id=hit.get("objectID"),
        )


@dataclass(frozen=True)
class ResultState:
    """Fetch lifecycle for one result set.

    Only ``stories_reducer`` produces new instances; never mutate in place.
    """

    data: Tuple[Item, ...] = ()
    is_loading: bool = False
    is_error: bool = False
