"""
Tree traversal - breadth-first search for microformat roots by type

The walk is queue based: documents with thousands of feed entries or
deeply nested replies never grow the Python stack. Two link kinds are
followed:

- structural: top-level items, then each item's `children`
- property: nested roots used as property values (only when
  include_properties is set, e.g. to reach "p-author h-card")
"""
from collections import deque
from typing import Iterable, Iterator, List, Optional, Union

from ..models.document import Mf2Document, Mf2Item, Mf2Type, as_document, type_names


def iter_entries(
    doc: Mf2Document,
    types: Iterable[Union[str, Mf2Type]],
    include_properties: bool = False,
) -> Iterator[Mf2Item]:
    """
    Yield items whose type tags intersect `types`, in BFS order.

    Args:
        doc: parsed document
        types: wanted type tags, e.g. ['h-entry', 'h-event']
        include_properties: also descend into property values

    Yields:
        Matching items, unmodified
    """
    wanted = set(type_names(types))
    queue = deque(as_document(doc).items)
    while queue:
        item = queue.popleft()
        if any(t in wanted for t in item.type):
            yield item
        queue.extend(item.children)
        if include_properties:
            for values in item.properties.values():
                queue.extend(v for v in values if isinstance(v, Mf2Item))


def find_first_entry(doc: Mf2Document, types: Iterable[Union[str, Mf2Type]]) -> Optional[Mf2Item]:
    """
    Find the first interesting h-* item in BFS order.

    Property values are not searched.

    Returns:
        The first item matching one of `types`, or None
    """
    return next(iter_entries(doc, types, False), None)


def find_all_entries(
    doc: Mf2Document,
    types: Iterable[Union[str, Mf2Type]],
    include_properties: bool = False,
) -> List[Mf2Item]:
    """
    Find all h-* items of the given types in BFS order.

    Traverses the top-level items and their children and descendants.
    Includes property values (finding all h-cards would otherwise miss
    "p-author h-card") only if `include_properties` is True.
    """
    return list(iter_entries(doc, types, include_properties))
