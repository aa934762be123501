"""
Pydantic models for simplified posts

These are the shapes handed back to feed readers. Field names follow the
hyphenated microformats vocabulary on the wire ('content-plain',
'in-reply-to', ...); use `to_dict()` to get that form.
"""
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Mf2Model(BaseModel):
    """Base for output models: immutable, constructible by field name or alias"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Wire form: hyphenated keys, absent fields omitted"""
        return self.model_dump(by_alias=True, exclude_none=True)


class AuthorInfo(Mf2Model):
    """Author name, photo and url; at least one is present"""
    name: Optional[str] = None
    photo: Optional[str] = None
    url: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.name or self.photo or self.url)

    @property
    def is_url_only(self) -> bool:
        """Only a url: an author page that still needs resolving"""
        return bool(self.url) and not (self.name or self.photo)


class PostReference(Mf2Model):
    """A referenced post known only by its URL"""
    url: str


class SimplifiedPostBase(Mf2Model):
    """Fields shared by entries, events and cites"""
    url: Optional[str] = None
    uid: Optional[str] = None
    photo: Optional[str] = None
    featured: Optional[str] = None
    logo: Optional[str] = None

    # Normalized dates, with the raw strings they came from
    start: Optional[str] = None
    end: Optional[str] = None
    published: Optional[str] = None
    updated: Optional[str] = None
    deleted: Optional[str] = None
    start_str: Optional[str] = Field(default=None, alias="start-str")
    end_str: Optional[str] = Field(default=None, alias="end-str")
    published_str: Optional[str] = Field(default=None, alias="published-str")
    updated_str: Optional[str] = Field(default=None, alias="updated-str")
    deleted_str: Optional[str] = Field(default=None, alias="deleted-str")

    author: Optional[AuthorInfo] = None
    content: Optional[str] = None
    content_plain: Optional[str] = Field(default=None, alias="content-plain")
    summary: Optional[str] = None
    syndication: Optional[List[str]] = None


class SimplifiedEvent(SimplifiedPostBase):
    type: Literal["event"] = "event"
    name: Optional[str] = None


class SimplifiedCite(SimplifiedPostBase):
    type: Literal["cite"] = "cite"
    name: Optional[str] = None


class SimplifiedEntry(SimplifiedPostBase):
    type: Literal["entry"] = "entry"
    name: Optional[str] = None

    # Each reference is either a bare URL or a fully interpreted post
    in_reply_to: Optional[List["PostRef"]] = Field(default=None, alias="in-reply-to")
    like_of: Optional[List["PostRef"]] = Field(default=None, alias="like-of")
    repost_of: Optional[List["PostRef"]] = Field(default=None, alias="repost-of")
    bookmark_of: Optional[List["PostRef"]] = Field(default=None, alias="bookmark-of")


SimplifiedPost = Union[SimplifiedEvent, SimplifiedEntry, SimplifiedCite]
PostRef = Union[PostReference, SimplifiedEvent, SimplifiedEntry, SimplifiedCite]

SimplifiedEntry.model_rebuild()


class SimplifiedFeed(Mf2Model):
    """An h-feed, or a page's top-level items read as one"""
    name: Optional[str] = None
    entries: List[SimplifiedPost] = Field(default_factory=list)
