"""
Post type discovery and response type discovery

https://www.w3.org/TR/post-type-discovery/

Pure classification of an mf2 item by its structure: type tags first,
then rsvp, then the first reference/media property holding a URI, then
name vs content.
"""
from enum import Enum
from typing import List, Tuple

from ..models.document import Mf2Item, Mf2Type
from ..utils.text_utils import all_plain_text, get_plain_text, is_name_a_title
from ..utils.url_utils import is_uri


class PostKind(str, Enum):
    """Discovered post or response type."""
    EVENT = "event"
    RSVP = "rsvp"
    REPOST = "repost"
    LIKE = "like"
    BOOKMARK = "bookmark"
    REPLY = "reply"
    VIDEO = "video"
    PHOTO = "photo"
    ARTICLE = "article"
    NOTE = "note"
    MENTION = "mention"


RSVP_VALUES = {'yes', 'no', 'maybe', 'interested'}

# Checked in order; the first property holding a URI decides
RESPONSE_PROPERTIES: List[Tuple[str, PostKind]] = [
    ('repost-of', PostKind.REPOST),
    ('like-of', PostKind.LIKE),
    ('bookmark-of', PostKind.BOOKMARK),
    ('in-reply-to', PostKind.REPLY),
]
MEDIA_PROPERTIES: List[Tuple[str, PostKind]] = [
    ('video', PostKind.VIDEO),
    ('photo', PostKind.PHOTO),
]


def is_rsvp(item: Mf2Item) -> bool:
    return any(v in RSVP_VALUES for v in all_plain_text(item.get('rsvp')))


def _is_prop_uri(item: Mf2Item, name: str) -> bool:
    return is_uri(get_plain_text(item.get(name)))


def _implied_type(item: Mf2Item, implied: List[Tuple[str, PostKind]]):
    for prop, kind in implied:
        if prop in item.properties and _is_prop_uri(item, prop):
            return kind
    return None


def post_type_discovery(item: Mf2Item) -> PostKind:
    """
    Implementation of the post-type discovery algorithm.

    Args:
        item: mf2 item representing the entry to test

    Returns:
        One of: event, rsvp, repost, like, bookmark, reply, video,
        photo, article, note
    """
    if item.has_type(Mf2Type.EVENT):
        return PostKind.EVENT

    if is_rsvp(item):
        return PostKind.RSVP

    kind = _implied_type(item, RESPONSE_PROPERTIES + MEDIA_PROPERTIES)
    if kind is not None:
        return kind

    name = get_plain_text(item.get('name'))
    content = get_plain_text(item.get('content')) or get_plain_text(item.get('summary'))
    if content and name and is_name_a_title(name, content):
        return PostKind.ARTICLE

    return PostKind.NOTE


def response_type_discovery(item: Mf2Item) -> PostKind:
    """
    Implementation of the response-type discovery algorithm.

    Returns:
        One of: rsvp, repost, like, bookmark, reply, mention
    """
    if is_rsvp(item):
        return PostKind.RSVP

    return _implied_type(item, RESPONSE_PROPERTIES) or PostKind.MENTION
