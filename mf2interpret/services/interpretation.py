"""
Interpretation - turn parsed mf2 items into simplified posts

Entry points:
    interpret_entry(doc, source_url, ...) -> SimplifiedEntry | None
    interpret_event(doc, source_url, ...) -> SimplifiedEvent | None
    interpret_cite(doc, source_url, ...)  -> SimplifiedCite | None
    interpret_feed(doc, source_url, ...)  -> SimplifiedFeed
    interpret(doc, source_url, ...)       -> dispatch on the item's type

Common arguments:
    source_url: URL of the parsed page (relative paths in content are
        resolved against it)
    base_href: href of the page's <base> tag, if any
    item: the item to interpret; defaults to the first one of the right
        type in the document
    use_rel_syndication: also include the page's rel=syndication links.
        Turn this off for h-feeds that put rel=syndication on each entry.
    fetch: optional `fetch(url) -> Mf2Document`, plain or async, used to
        resolve author pages. Never implied.

Entries reference other posts (in-reply-to, like-of, ...). Nested items
are interpreted recursively through `interpret`, which tracks the chain
of items being interpreted so a self-referencing document cannot recurse
without bound.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..config import get_settings
from ..models.document import Mf2Document, Mf2Item, Mf2Type, RenderedText, as_document
from ..models.post import (
    PostReference,
    SimplifiedCite,
    SimplifiedEntry,
    SimplifiedEvent,
    SimplifiedFeed,
    SimplifiedPost,
)
from ..utils.datetime_utils import DateFormatError, normalize_dt
from ..utils.text_utils import all_plain_text, get_plain_text, is_name_a_title, value_text
from ..utils.url_utils import convert_relative_paths_to_absolute
from .authorship import FetchFn, find_author
from .traversal import find_first_entry

logger = logging.getLogger(__name__)


IDENTITY_PROPERTIES = ['url', 'uid', 'photo', 'featured', 'logo']
DATE_PROPERTIES = ['start', 'end', 'published', 'updated', 'deleted']

# mf2 property -> SimplifiedEntry field
REFERENCE_PROPERTIES = [
    ('in-reply-to', 'in_reply_to'),
    ('like-of', 'like_of'),
    ('repost-of', 'repost_of'),
    ('bookmark-of', 'bookmark_of'),
]


@dataclass(frozen=True)
class _Context:
    """Per-call state threaded through the recursion."""
    doc: Mf2Document
    source_url: str
    base_href: Optional[str]
    use_rel_syndication: bool
    fetch: Optional[FetchFn]
    max_depth: int
    chain: Tuple[int, ...] = ()

    def descend(self, item: Mf2Item) -> "_Context":
        return _Context(
            doc=self.doc,
            source_url=self.source_url,
            base_href=self.base_href,
            use_rel_syndication=self.use_rel_syndication,
            fetch=self.fetch,
            max_depth=self.max_depth,
            chain=self.chain + (id(item),),
        )


def _make_context(doc, source_url, base_href, use_rel_syndication, fetch) -> _Context:
    return _Context(
        doc=as_document(doc),
        source_url=source_url,
        base_href=base_href,
        use_rel_syndication=use_rel_syndication,
        fetch=fetch,
        max_depth=get_settings().max_depth,
    )


# =============================================================================
# Common properties
# =============================================================================

def _content_fields(ctx: _Context, item: Mf2Item) -> Dict[str, Any]:
    values = item.get('content')
    if not values:
        return {}

    first = values[0]
    if isinstance(first, RenderedText):
        content_html = (first.html or '').strip()
        content_value = (first.value or '').strip()
    else:
        # plain text content is deliberately left untrimmed
        content_html = content_value = value_text(first)

    if content_html is None:
        return {}
    return {
        'content': convert_relative_paths_to_absolute(ctx.source_url, ctx.base_href, content_html),
        'content_plain': content_value,
    }


def _syndication(ctx: _Context, item: Mf2Item) -> List[str]:
    own = all_plain_text(item.get('syndication'))
    if not ctx.use_rel_syndication:
        return own
    # ordered union, rel links first
    return list(dict.fromkeys(ctx.doc.rel('syndication') + own))


async def _common_properties(ctx: _Context, item: Mf2Item) -> Dict[str, Any]:
    result: Dict[str, Any] = {}

    for prop in IDENTITY_PROPERTIES:
        value = get_plain_text(item.get(prop))
        if value:
            result[prop] = value

    for prop in DATE_PROPERTIES:
        date_str = get_plain_text(item.get(prop))
        if not date_str:
            continue
        result[f"{prop}_str"] = date_str
        try:
            result[prop] = normalize_dt(date_str)
        except DateFormatError as e:
            logger.debug(f"Keeping raw {prop} for {result.get('url', ctx.source_url)}: {e}")

    author = await find_author(ctx.doc, item, ctx.fetch)
    if author is not None:
        result['author'] = author

    result.update(_content_fields(ctx, item))

    summary_values = item.get('summary')
    if summary_values:
        first = summary_values[0]
        summary = first.value if isinstance(first, RenderedText) else value_text(first)
        if summary is not None:
            result['summary'] = summary

    syndication = _syndication(ctx, item)
    if syndication:
        result['syndication'] = syndication

    return result


async def interpret_common_properties(
    doc: Mf2Document,
    source_url: str,
    base_href: Optional[str],
    item: Mf2Item,
    use_rel_syndication: bool = True,
    fetch: Optional[FetchFn] = None,
) -> Dict[str, Any]:
    """
    Interpret the properties shared by entries, events and cites.

    Returns:
        Field values keyed by SimplifiedPostBase field name
    """
    ctx = _make_context(doc, source_url, base_href, use_rel_syndication, fetch)
    return await _common_properties(ctx, item)


def _title(item: Mf2Item, common: Dict[str, Any]) -> Optional[str]:
    title = get_plain_text(item.get('name'))
    if title and is_name_a_title(title, common.get('content_plain')):
        return title
    return None


# =============================================================================
# Singular interpreters
# =============================================================================

async def _interpret_event(ctx: _Context, item: Mf2Item) -> SimplifiedEvent:
    common = await _common_properties(ctx, item)
    return SimplifiedEvent(**common, name=get_plain_text(item.get('name')) or None)


async def _interpret_cite(ctx: _Context, item: Mf2Item) -> SimplifiedCite:
    common = await _common_properties(ctx, item)
    return SimplifiedCite(**common, name=_title(item, common))


async def _interpret_entry(ctx: _Context, item: Mf2Item) -> SimplifiedEntry:
    common = await _common_properties(ctx, item)
    references: Dict[str, List[Any]] = {}

    for prop, field_name in REFERENCE_PROPERTIES:
        for value in item.get(prop):
            refs = references.setdefault(field_name, [])
            if isinstance(value, Mf2Item):
                nested = await _interpret(ctx, value)
                if nested is None:
                    nested = _fallback_reference(value)
                if nested is not None:
                    refs.append(nested)
            else:
                url = value_text(value)
                if url is not None:
                    refs.append(PostReference(url=url))

    return SimplifiedEntry(**common, name=_title(item, common), **references)


def _fallback_reference(item: Mf2Item) -> Optional[PostReference]:
    url = get_plain_text(item.get('url'))
    return PostReference(url=url) if url else None


async def _interpret(ctx: _Context, item: Mf2Item) -> Optional[SimplifiedPost]:
    if id(item) in ctx.chain:
        logger.warning(f"Not interpreting {item.type} again: it references itself")
        return None
    if len(ctx.chain) >= ctx.max_depth:
        logger.warning(f"Not interpreting {item.type}: nesting deeper than {ctx.max_depth}")
        return None

    inner = ctx.descend(item)
    if item.has_type(Mf2Type.EVENT):
        return await _interpret_event(inner, item)
    if item.has_type(Mf2Type.ENTRY):
        return await _interpret_entry(inner, item)
    if item.has_type(Mf2Type.CITE):
        return await _interpret_cite(inner, item)
    return None


# =============================================================================
# Public API
# =============================================================================

async def interpret(
    doc: Mf2Document,
    source_url: str,
    base_href: Optional[str] = None,
    item: Optional[Mf2Item] = None,
    use_rel_syndication: bool = True,
    fetch: Optional[FetchFn] = None,
) -> Optional[SimplifiedPost]:
    """
    Interpret a permalink of unknown type.

    Finds the first h-entry, h-event or h-cite (unless `item` is given)
    and delegates to the matching interpreter.

    Returns:
        A simplified entry, event or cite, or None when the item is of
        none of those types
    """
    ctx = _make_context(doc, source_url, base_href, use_rel_syndication, fetch)
    item = item or find_first_entry(ctx.doc, [Mf2Type.ENTRY, Mf2Type.EVENT, Mf2Type.CITE])
    if item is None:
        return None
    return await _interpret(ctx, item)


async def interpret_event(
    doc: Mf2Document,
    source_url: str,
    base_href: Optional[str] = None,
    item: Optional[Mf2Item] = None,
    use_rel_syndication: bool = True,
    fetch: Optional[FetchFn] = None,
) -> Optional[SimplifiedEvent]:
    """Interpret an h-event: common properties plus its name."""
    ctx = _make_context(doc, source_url, base_href, use_rel_syndication, fetch)
    item = item or find_first_entry(ctx.doc, [Mf2Type.EVENT])
    if item is None:
        return None
    return await _interpret_event(ctx.descend(item), item)


async def interpret_entry(
    doc: Mf2Document,
    source_url: str,
    base_href: Optional[str] = None,
    item: Optional[Mf2Item] = None,
    use_rel_syndication: bool = True,
    fetch: Optional[FetchFn] = None,
) -> Optional[SimplifiedEntry]:
    """
    Interpret an h-entry.

    Besides the common properties, the result carries:
    - name, only when it is an explicit title (see is_name_a_title)
    - in-reply-to / like-of / repost-of / bookmark-of, each a list of
      PostReference(url) for plain URLs or interpreted posts for nested
      items, in document order

    Returns:
        SimplifiedEntry, or None if the document has no h-entry
    """
    ctx = _make_context(doc, source_url, base_href, use_rel_syndication, fetch)
    item = item or find_first_entry(ctx.doc, [Mf2Type.ENTRY])
    if item is None:
        return None
    return await _interpret_entry(ctx.descend(item), item)


async def interpret_cite(
    doc: Mf2Document,
    source_url: str,
    base_href: Optional[str] = None,
    item: Optional[Mf2Item] = None,
    use_rel_syndication: bool = True,
    fetch: Optional[FetchFn] = None,
) -> Optional[SimplifiedCite]:
    """Interpret an h-cite: common properties plus an explicit title."""
    ctx = _make_context(doc, source_url, base_href, use_rel_syndication, fetch)
    item = item or find_first_entry(ctx.doc, [Mf2Type.CITE])
    if item is None:
        return None
    return await _interpret_cite(ctx.descend(item), item)


async def interpret_feed(
    doc: Mf2Document,
    source_url: str,
    base_href: Optional[str] = None,
    item: Optional[Mf2Item] = None,
    use_rel_syndication: bool = True,
    fetch: Optional[FetchFn] = None,
) -> SimplifiedFeed:
    """
    Interpret a page as an h-feed, or as a top-level collection of posts.

    Each structural child of the feed (or each top-level item when the
    page has no h-feed) is interpreted in order; children that are not
    posts are skipped.

    Returns:
        SimplifiedFeed with the feed name (if any) and its entries
    """
    ctx = _make_context(doc, source_url, base_href, use_rel_syndication, fetch)
    hfeed = item or find_first_entry(ctx.doc, [Mf2Type.FEED])

    name = None
    if hfeed is not None:
        name = get_plain_text(hfeed.get('name')) or None
        children = hfeed.children
    else:
        children = ctx.doc.items

    entries = []
    for child in children:
        entry = await _interpret(ctx, child)
        if entry is None:
            logger.debug(f"Skipping feed child {child.type}")
            continue
        entries.append(entry)

    return SimplifiedFeed(name=name, entries=entries)
