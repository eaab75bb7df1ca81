"""Utils module -- config and logging."""

from hacker_stories.utils.config import Settings, settings
from hacker_stories.utils.logger import get_logger

__all__ = ["Settings", "settings", "get_logger"]
