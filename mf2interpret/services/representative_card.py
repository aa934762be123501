"""
Representative h-card - the card a page nominates as describing a URL

http://microformats.org/wiki/representative-h-card-parsing

Every h-card on the page is a candidate, including cards nested in
properties ("p-author h-card"). Tiers, strongest first:

1. uid and url both contain the URL  -> first such card
2. a url that is also a rel=me link  -> first such card
3. exactly one card whose url contains the URL -> that card

Anything else (no match, or several tier-3 matches) is ambiguous.
"""
import logging
from typing import Optional

from ..models.document import Mf2Document, Mf2Item, Mf2Type, as_document
from ..utils.text_utils import all_plain_text
from .traversal import find_all_entries

logger = logging.getLogger(__name__)


def representative_hcard(doc: Mf2Document, source_url: str) -> Optional[Mf2Item]:
    """
    Find the representative h-card for a URL.

    Args:
        doc: parsed document
        source_url: the URL the card should represent

    Returns:
        The representative h-card, or None if absent or ambiguous
    """
    doc = as_document(doc)
    hcards = find_all_entries(doc, [Mf2Type.CARD], include_properties=True)

    # uid and url both match source_url
    for hcard in hcards:
        if source_url in all_plain_text(hcard.get('uid')) and source_url in all_plain_text(hcard.get('url')):
            logger.debug(f"Representative card for {source_url}: uid+url match")
            return hcard

    # url that is also a rel=me
    rel_mes = doc.rel('me')
    for hcard in hcards:
        if any(url in rel_mes for url in all_plain_text(hcard.get('url'))):
            logger.debug(f"Representative card for {source_url}: rel=me match")
            return hcard

    # single hcard with matching url
    matches = [h for h in hcards if source_url in all_plain_text(h.get('url'))]
    if len(matches) == 1:
        logger.debug(f"Representative card for {source_url}: sole url match")
        return matches[0]

    logger.debug(f"No representative card for {source_url} ({len(matches)} url matches)")
    return None
