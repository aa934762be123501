"""
mf2interpret - interpret parsed microformats2 into simplified posts

Usage:
    from mf2interpret import Mf2Document, interpret_entry

    doc = Mf2Document.from_dict(mf2py.parse(doc=html, url=url))
    entry = await interpret_entry(doc, url)
    entry.to_dict()
    # {'type': 'entry', 'name': ..., 'author': {...}, 'content': ..., ...}
"""
from .models import (
    AuthorInfo,
    Mf2Document,
    Mf2Item,
    Mf2Type,
    PostReference,
    RenderedText,
    SimplifiedCite,
    SimplifiedEntry,
    SimplifiedEvent,
    SimplifiedFeed,
    SimplifiedPost,
    ValueText,
    as_document,
)
from .services import (
    Mf2Fetcher,
    PostKind,
    find_all_entries,
    find_author,
    find_first_entry,
    interpret,
    interpret_cite,
    interpret_entry,
    interpret_event,
    interpret_feed,
    parse_html,
    post_type_discovery,
    representative_hcard,
    response_type_discovery,
)
from .utils import DateFormatError, convert_relative_paths_to_absolute, is_name_a_title, normalize_dt

__all__ = [
    'AuthorInfo',
    'Mf2Document',
    'Mf2Item',
    'Mf2Type',
    'PostReference',
    'RenderedText',
    'SimplifiedCite',
    'SimplifiedEntry',
    'SimplifiedEvent',
    'SimplifiedFeed',
    'SimplifiedPost',
    'ValueText',
    'as_document',
    'Mf2Fetcher',
    'PostKind',
    'find_all_entries',
    'find_author',
    'find_first_entry',
    'interpret',
    'interpret_cite',
    'interpret_entry',
    'interpret_event',
    'interpret_feed',
    'parse_html',
    'post_type_discovery',
    'representative_hcard',
    'response_type_discovery',
    'DateFormatError',
    'convert_relative_paths_to_absolute',
    'is_name_a_title',
    'normalize_dt',
]
