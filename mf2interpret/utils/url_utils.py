"""
URL utilities

URI syntax checks, loose URL comparison, and rewriting of relative paths
inside HTML fragments taken from e-content.
"""
import re
from typing import Optional
from urllib.parse import urljoin


# Characters allowed anywhere in a URI (RFC 3986 reserved + unreserved + '%')
URI_ILLEGAL_CHARS_RE = re.compile(r"[^a-z0-9:/?#\[\]@!$&'()*+,;=.\-_~%]", re.IGNORECASE)
URI_BAD_ESCAPE_RE = re.compile(r"%[^0-9a-f]|%[0-9a-f](?:[^0-9a-f]|$)", re.IGNORECASE)
URI_SPLIT_RE = re.compile(r"^(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?")
URI_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+\-.]*$")

# Path-bearing attributes rewritten in HTML fragments
URL_ATTRIBUTES = {
    'a': ['href'],
    'link': ['href'],
    'img': ['src'],
    'audio': ['src'],
    'video': ['src', 'poster'],
    'source': ['src'],
}


def is_uri(value: Optional[str]) -> bool:
    """
    Check that a string is a syntactically valid absolute URI.

    A scheme is required. The string may only contain URI characters,
    percent escapes must be complete, and the path must fit the authority
    (empty or '/'-rooted when an authority is present, never starting
    with '//' when it is not).

    Args:
        value: candidate string

    Returns:
        True for a valid URI
    """
    if not value:
        return False
    if URI_ILLEGAL_CHARS_RE.search(value):
        return False
    if URI_BAD_ESCAPE_RE.search(value):
        return False

    scheme, authority, path, _query, _fragment = URI_SPLIT_RE.match(value).groups()
    path = path or ''
    if not scheme:
        return False
    if authority:
        if path and not path.startswith('/'):
            return False
    elif path.startswith('//'):
        return False
    return bool(URI_SCHEME_RE.match(scheme.lower()))


def is_http_url(value: Optional[str]) -> bool:
    """True for strings that start with an http(s) scheme."""
    return bool(value) and (value.startswith('http://') or value.startswith('https://'))


def url_equal(url1: str, url2: str) -> bool:
    """
    Compare two URLs ignoring one trailing slash on either side.

    Args:
        url1: first URL
        url2: second URL

    Returns:
        True if the URLs name the same page
    """
    _url1 = url1[:-1] if url1.endswith('/') else url1
    _url2 = url2[:-1] if url2.endswith('/') else url2
    return _url1 == _url2


def convert_relative_paths_to_absolute(source_url: Optional[str], base_href: Optional[str], html: Optional[str]) -> Optional[str]:
    """
    Rewrite relative paths in an HTML fragment to absolute URLs.

    Only the values of path-bearing attributes (see URL_ATTRIBUTES) change;
    the rest of the markup, including each value's quoting, is kept
    byte for byte. Values that are already absolute resolve to themselves.

    Args:
        source_url: URL the fragment was fetched from
        base_href: optional href of the page's <base> tag, itself
            resolved against source_url
        html: the fragment

    Returns:
        The rewritten fragment (unchanged if source_url or html is empty)
    """
    if not source_url or not html:
        return html

    base_url = urljoin(source_url, base_href) if base_href else source_url

    def convert(match: re.Match) -> str:
        return f"{match.group(1)}{urljoin(base_url, match.group(2))}{match.group(3)}"

    for tagname, attributes in URL_ATTRIBUTES.items():
        for attribute in attributes:
            pattern = re.compile(
                rf"""(<{tagname}\b[^>]*?\s{attribute}\s*=\s*['"])(.*?)(['"])""",
                re.IGNORECASE | re.MULTILINE | re.DOTALL,
            )
            html = pattern.sub(convert, html)
    return html
