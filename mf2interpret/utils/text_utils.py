"""
Plain-text extraction from polymorphic property values, and the
title-vs-content heuristic.
"""
import re
import unicodedata
from typing import List, Optional, Sequence

from ..models.document import Mf2Item, PropertyValue, RenderedText, ValueText


# Punctuation ignored when comparing a name against content
TITLE_PUNCTUATION_RE = re.compile(r"""[~`!@#$%^&*(){}\[\];:"'<,.>?/\\|\-_+=]""")
WHITESPACE_RE = re.compile(r"\s+")


def value_text(value: PropertyValue) -> Optional[str]:
    """The logical string carried by a single property value, if any."""
    if isinstance(value, str):
        return value
    if isinstance(value, (RenderedText, ValueText)):
        return value.value
    if isinstance(value, Mf2Item):
        return value.value
    return None


def get_plain_text(values: Optional[Sequence[PropertyValue]], strip: bool = False) -> Optional[str]:
    """
    Get the first value in a list of values that we expect to be plain-text.

    Objects contribute their "value" string; nested items without an
    implied value contribute nothing.

    Args:
        values: property values, possibly empty or None
        strip: strip surrounding whitespace from the result

    Returns:
        The text value or None
    """
    if not values:
        return None
    v = value_text(values[0])
    return v.strip() if v and strip else v


def all_plain_text(values: Optional[Sequence[PropertyValue]]) -> List[str]:
    """Every value that carries a string, in document order."""
    texts = []
    for value in values or []:
        text = value_text(value)
        if text is not None:
            texts.append(text)
    return texts


def _normalize_for_title(s: str) -> str:
    s = unicodedata.normalize('NFKD', s)
    s = s.lower()
    s = TITLE_PUNCTUATION_RE.sub('', s)
    return WHITESPACE_RE.sub('', s)


def is_name_a_title(name: Optional[str], content: Optional[str]) -> bool:
    """
    Determine whether the name property represents an explicit title.

    When an h-entry has no explicit p-name, parsers imply one by flattening
    the whole entry to text. That name starts with (or equals) the content
    and must not be shown as a title. So instead of a plain equality test we
    check whether the normalized content is contained in the normalized
    name; only a name that adds something is a title.

    Args:
        name: the p-name value that may represent a title
        content: the plain-text version of e-content

    Returns:
        True if the name likely is a separate, explicit title
    """
    if not content:
        return True
    if not name:
        return False
    return _normalize_for_title(content) not in _normalize_for_title(name)
