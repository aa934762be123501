"""
Pytest configuration for mf2interpret tests.
"""

import pytest

from mf2interpret.models import Mf2Document


def pytest_configure(config):
    """Configure pytest with asyncio marker."""
    config.addinivalue_line(
        "markers", "asyncio: mark test as an async test."
    )


@pytest.fixture
def make_doc():
    """Build an Mf2Document from parser-shaped dicts."""
    def _make(items, rels=None):
        return Mf2Document.from_dict({
            "items": items,
            "rels": rels or {},
            "rel-urls": {},
        })
    return _make


@pytest.fixture
def author_card():
    return {
        "type": ["h-card"],
        "properties": {
            "name": ["Desmond"],
            "photo": ["https://photo_url"],
            "url": ["https://some_url"],
        },
    }
