"""
Document model - the parsed microformats2 tree

A parser (mf2py or any compatible one) turns markup into a JSON-like dict:

    {
        "items": [{"type": [...], "properties": {...}, "children": [...]}],
        "rels": {"me": [...], "author": [...]},
        "rel-urls": {...},
    }

These dataclasses give that dict explicit shapes. Property values are a
tagged union, and every extractor must handle all of its variants:

- str           plain text (p-*, u-*, dt-* without extra data)
- RenderedText  e-* values carrying both {html, value}
- ValueText     objects carrying one logical string {value, alt}
- Mf2Item       a nested microformat root used as a property value

Items compare by identity: the same markup can legitimately appear twice
in a document, and the authorship lookup has to tell the copies apart.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union


class Mf2Type(str, Enum):
    """Root class names the interpreter looks for."""
    ENTRY = "h-entry"
    EVENT = "h-event"
    CITE = "h-cite"
    FEED = "h-feed"
    CARD = "h-card"


@dataclass
class RenderedText:
    """e-* property value: markup plus its rendered plain text."""
    html: str
    value: str = ""


@dataclass
class ValueText:
    """Object carrying a single logical string (e.g. u-photo with alt)."""
    value: str
    alt: Optional[str] = None


@dataclass(eq=False)
class Mf2Item:
    """
    A microformat root.

    `children` holds structural members (feed entries), `properties` holds
    semantic values. The two link kinds are traversed by different rules.
    """
    type: List[str]
    properties: Dict[str, List["PropertyValue"]] = field(default_factory=dict)
    children: List["Mf2Item"] = field(default_factory=list)
    id: Optional[str] = None

    # Implied plain-text value when the item is itself a property value
    value: Optional[str] = None

    def get(self, name: str) -> List["PropertyValue"]:
        """Values of a property, empty when absent."""
        return self.properties.get(name) or []

    def has_type(self, *types: str) -> bool:
        """True if any of this item's type tags is one of `types`."""
        wanted = set(type_names(types))
        return any(t in wanted for t in self.type)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Mf2Item":
        properties = {
            name: [p for p in map(parse_property_value, values or []) if p is not None]
            for name, values in (data.get("properties") or {}).items()
        }
        children = [cls.from_dict(c) for c in (data.get("children") or [])]
        value = data.get("value")
        return cls(
            type=list(data.get("type") or []),
            properties=properties,
            children=children,
            id=data.get("id"),
            value=value if isinstance(value, str) else None,
        )


PropertyValue = Union[str, RenderedText, ValueText, Mf2Item]


def parse_property_value(raw: Any) -> Optional[PropertyValue]:
    """
    Classify one raw property value into its variant.

    Objects that are neither an item, rendered html nor a {value} carry no
    text and yield None.
    """
    if isinstance(raw, (Mf2Item, RenderedText, ValueText)):
        return raw
    if isinstance(raw, Mapping):
        if "type" in raw and "properties" in raw:
            return Mf2Item.from_dict(raw)
        if "html" in raw:
            return RenderedText(html=raw.get("html") or "", value=raw.get("value") or "")
        if isinstance(raw.get("value"), str):
            return ValueText(value=raw["value"], alt=raw.get("alt"))
        return None
    if isinstance(raw, (int, float)):
        return str(raw)
    return raw if isinstance(raw, str) else None


@dataclass
class Mf2Document:
    """Parsed document: top-level items plus the rel index."""
    items: List[Mf2Item] = field(default_factory=list)
    rels: Dict[str, List[str]] = field(default_factory=dict)

    # rel-urls metadata, carried through but not interpreted
    rel_urls: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def rel(self, name: str) -> List[str]:
        """URLs for a document-level relation, empty when absent."""
        return self.rels.get(name) or []

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Mf2Document":
        return cls(
            items=[Mf2Item.from_dict(i) for i in (data.get("items") or [])],
            rels={k: list(v or []) for k, v in (data.get("rels") or {}).items()},
            rel_urls=dict(data.get("rel-urls") or {}),
        )


def as_document(parsed: Union[Mf2Document, Mapping[str, Any]]) -> Mf2Document:
    """Accept either a document model or the raw dict a parser returns."""
    if isinstance(parsed, Mf2Document):
        return parsed
    if isinstance(parsed, Mapping):
        return Mf2Document.from_dict(parsed)
    raise TypeError(f"Cannot interpret {type(parsed).__name__} as an mf2 document")


def type_names(types: Iterable[Union[str, Mf2Type]]) -> List[str]:
    return [t.value if isinstance(t, Mf2Type) else t for t in types]
