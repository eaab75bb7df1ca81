"""Exception hierarchy for the search core."""


class HackerStoriesError(Exception):
    """Base class for every error raised by this package."""


class FetchError(HackerStoriesError):
    """The stories request failed: transport, HTTP status or payload shape.

    Never escapes ``SearchController``; it is folded into ``is_error``.
    """

    def __init__(self, url: str, reason: str):
        super().__init__(f"Fetching {url} failed: {reason}")
        self.url = url
        self.reason = reason


class StorageError(HackerStoriesError):
    """The durable key/value store could not be read or written."""


class UnknownActionError(HackerStoriesError):
    """A reducer received an action outside its closed set.

    This is a programming defect, not a runtime condition.
    """
