"""Test helpers: the two seed stories and a fake search endpoint."""

import httpx

from hacker_stories.web.client import StoriesClient

ENDPOINT = "https://hn.test/api/v1/search?query="

SEED_HITS = [
    {
        "title": "React",
        "url": "https://reactjs.org/",
        "author": "Jordan Walke",
        "num_comments": 3,
        "points": 4,
        "objectID": 0,
    },
    {
        "title": "Redux",
        "url": "https://redux.js.org/",
        "author": "Dan Abramov, Andrew Clark",
        "num_comments": 2,
        "points": 5,
        "objectID": 1,
    },
]


def make_client(handler) -> StoriesClient:
    """A StoriesClient whose requests are answered by *handler*."""
    return StoriesClient(http=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
