"""
Models - input document tree and simplified output posts

Architecture:
- The parsed mf2 tree is plain dataclasses (document.py)
- Interpreted posts are frozen pydantic models (post.py)
- Interpretation logic lives in services, never on the models
"""

from .document import (
    Mf2Document,
    Mf2Item,
    Mf2Type,
    PropertyValue,
    RenderedText,
    ValueText,
    as_document,
)
from .post import (
    AuthorInfo,
    PostReference,
    SimplifiedCite,
    SimplifiedEntry,
    SimplifiedEvent,
    SimplifiedFeed,
    SimplifiedPost,
)

__all__ = [
    # Input tree
    'Mf2Document',
    'Mf2Item',
    'Mf2Type',
    'PropertyValue',
    'RenderedText',
    'ValueText',
    'as_document',

    # Output posts
    'AuthorInfo',
    'PostReference',
    'SimplifiedCite',
    'SimplifiedEntry',
    'SimplifiedEvent',
    'SimplifiedFeed',
    'SimplifiedPost',
]
