from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, model_validator
from typing import List, Optional


class Author(BaseModel):
    name: Optional[str] = None
    url: Optional[str] = None
    avatar: Optional[str] = None


class Attachment(BaseModel):
    url: str
    mime_type: str
    title: Optional[str] = None
    size_in_bytes: Optional[StrictInt] = Field(None, ge=0)
    duration_in_seconds: Optional[StrictFloat] = None


class Hub(BaseModel):
    type: str
    url: str


class _Authored(BaseModel):
    """Base for objects carrying both the version 1.1 'authors' list and the
    version 1.0 single 'author'.

    After validation only 'authors' is populated.
    """
    authors: Optional[List[Author]] = None
    author: Optional[Author] = None

    @model_validator(mode="after")
    def _fold_author(self):
        return self.normalize_authors()

    def normalize_authors(self):
        if self.author is not None:
            # an existing 'authors' list wins, the legacy value is dropped
            if self.authors is None:
                self.authors = [self.author]
            self.author = None
        return self


class Item(_Authored):
    id: str
    url: Optional[str] = None
    external_url: Optional[str] = None
    title: Optional[str] = None
    content_html: Optional[str] = None
    content_text: Optional[str] = None
    summary: Optional[str] = None
    image: Optional[str] = None
    banner_image: Optional[str] = None
    date_published: Optional[str] = None
    date_modified: Optional[str] = None
    tags: Optional[List[str]] = None
    language: Optional[str] = None
    attachments: Optional[List[Attachment]] = None


class Feed(_Authored):
    version: Optional[str] = None
    title: str
    home_page_url: Optional[str] = None
    feed_url: Optional[str] = None
    description: Optional[str] = None
    user_comment: Optional[str] = None
    next_url: Optional[str] = None
    icon: Optional[str] = None
    favicon: Optional[str] = None
    language: Optional[str] = None
    expired: Optional[StrictBool] = None
    hubs: Optional[List[Hub]] = None
    items: Optional[List[Item]] = None
