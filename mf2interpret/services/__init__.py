"""
Services - traversal, authorship, classification and interpretation
"""
from .authorship import FetchFn, find_author, parse_author
from .fetcher import Mf2Fetcher, parse_html
from .interpretation import (
    interpret,
    interpret_cite,
    interpret_common_properties,
    interpret_entry,
    interpret_event,
    interpret_feed,
)
from .post_type import PostKind, post_type_discovery, response_type_discovery
from .representative_card import representative_hcard
from .traversal import find_all_entries, find_first_entry, iter_entries

__all__ = [
    'FetchFn',
    'find_author',
    'parse_author',
    'Mf2Fetcher',
    'parse_html',
    'interpret',
    'interpret_cite',
    'interpret_common_properties',
    'interpret_entry',
    'interpret_event',
    'interpret_feed',
    'PostKind',
    'post_type_discovery',
    'response_type_discovery',
    'representative_hcard',
    'find_all_entries',
    'find_first_entry',
    'iter_entries',
]
