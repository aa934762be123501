"""
Authorship - determine the author of an h-entry

Implements https://indieweb.org/authorship:

1. the entry's own author property
2. otherwise the author property of the h-feed that contains the entry
3. a full author (card or name) is final; a bare URL becomes the
   author page
4. with no author at all, rel=author names the author page
5. the author page is fetched (only if a fetch collaborator is given)
   and searched for a card whose
   a. url == uid == author page
   b. url is one of the author page's rel=me links
   c. url == author page
6. otherwise no deterministic author can be found

The fetch collaborator is a callable `fetch(url) -> Mf2Document`, either
plain or async.
Its errors propagate to the caller; nothing here retries.
"""
import inspect
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from ..models.document import Mf2Document, Mf2Item, Mf2Type, PropertyValue, as_document
from ..models.post import AuthorInfo
from ..utils.text_utils import get_plain_text, value_text
from ..utils.url_utils import is_http_url, url_equal
from .traversal import find_all_entries, find_first_entry, iter_entries

logger = logging.getLogger(__name__)

FetchResult = Union[Mf2Document, Mapping[str, Any]]
FetchFn = Callable[[str], Union[FetchResult, Awaitable[FetchResult]]]


def parse_author(value: Optional[PropertyValue]) -> Optional[AuthorInfo]:
    """
    Parse the value of an author property.

    It can be a compound h-card, or a single string that is either a URL
    or a name.

    Args:
        value: the property value

    Returns:
        AuthorInfo with whichever of name/photo/url were found, or None
    """
    if isinstance(value, Mf2Item):
        author = AuthorInfo(
            name=get_plain_text(value.get('name')) or None,
            photo=get_plain_text(value.get('photo')) or None,
            url=get_plain_text(value.get('url')) or None,
        )
    else:
        text = value_text(value) if value is not None else None
        if not text:
            return None
        if is_http_url(text):
            author = AuthorInfo(url=text)
        else:
            author = AuthorInfo(name=text)
    return None if author.is_empty else author


def _entry_author(item: Mf2Item) -> Optional[AuthorInfo]:
    values = item.get('author')
    if not values:
        return None
    return parse_author(values[0])


def _parent_feed_author(doc: Mf2Document, entry: Mf2Item) -> Optional[AuthorInfo]:
    for hfeed in iter_entries(doc, [Mf2Type.FEED]):
        if any(child is entry for child in hfeed.children):
            # not an entry, but its author property reads the same way
            return _entry_author(hfeed)
    return None


def _card_from_author_page(doc: Mf2Document, author_page: str) -> Optional[AuthorInfo]:
    hcards = find_all_entries(doc, [Mf2Type.CARD], include_properties=True)

    for hcard in hcards:
        hcard_url = get_plain_text(hcard.get('url'))
        hcard_uid = get_plain_text(hcard.get('uid'))
        if hcard_url and hcard_uid and hcard_url == hcard_uid and url_equal(hcard_url, author_page):
            logger.debug(f"Author page {author_page}: card with url == uid")
            return parse_author(hcard)

    rel_mes = doc.rel('me')
    for hcard in hcards:
        hcard_url = get_plain_text(hcard.get('url'))
        if hcard_url and hcard_url in rel_mes:
            logger.debug(f"Author page {author_page}: card url is rel=me")
            return parse_author(hcard)

    for hcard in hcards:
        hcard_url = get_plain_text(hcard.get('url'))
        if hcard_url and url_equal(hcard_url, author_page):
            logger.debug(f"Author page {author_page}: card url matches page")
            return parse_author(hcard)

    logger.debug(f"Author page {author_page}: no deterministic card")
    return None


async def find_author(
    doc: Mf2Document,
    entry: Optional[Mf2Item] = None,
    fetch: Optional[FetchFn] = None,
) -> Optional[AuthorInfo]:
    """
    Use the authorship discovery algorithm to find an entry's author.

    Args:
        doc: parsed document containing the entry
        entry: the h-entry to examine; defaults to the first one
        fetch: optional collaborator (plain or async) that fetches and parses a URL;
            without it an author page is returned as a bare url

    Returns:
        AuthorInfo, or None if no author can be determined
    """
    doc = as_document(doc)
    entry = entry or find_first_entry(doc, [Mf2Type.ENTRY])
    if entry is None:
        return None

    author = _entry_author(entry) or _parent_feed_author(doc, entry)

    author_page = None
    if author is not None:
        if not author.is_url_only:
            return author
        author_page = author.url

    if not author_page:
        rel_authors = doc.rel('author')
        if rel_authors:
            author_page = rel_authors[0]
            logger.debug(f"Using rel=author {author_page} as author page")

    if not author_page:
        return None

    if fetch is None:
        return AuthorInfo(url=author_page)

    logger.info(f"Fetching author page {author_page}")
    fetched = fetch(author_page)
    if inspect.isawaitable(fetched):
        fetched = await fetched
    author_doc = as_document(fetched)
    return _card_from_author_page(author_doc, author_page)
