"""Web module -- async stories client for the search endpoint."""

from hacker_stories.web.client import StoriesClient, build_search_url, parse_hits

__all__ = ["StoriesClient", "build_search_url", "parse_hits"]
