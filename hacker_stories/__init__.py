"""Hacker Stories -- search-and-list client for Hacker News."""

__version__ = "0.1.0"
