"""Shared fixtures."""

import pytest

from hacker_stories.models import Item
from tests.helpers import SEED_HITS


@pytest.fixture
def seed_hits():
    return [dict(hit) for hit in SEED_HITS]


@pytest.fixture
def seed_items():
    return tuple(Item.from_hit(hit) for hit in SEED_HITS)
