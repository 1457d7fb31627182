"""
Feed data container.

Typed records describing a feed before it is rendered to a concrete format.
Field-level checks here only reject values of the wrong shape. Format rules
(mandatory fields, ranges, URLs) belong to the renderer.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


FEED_LINK_TYPES = ("atom", "rss", "rdf")


class Generator(BaseModel):
    name: str
    version: Optional[str] = None
    uri: Optional[str] = None


class Author(BaseModel):
    name: str
    email: Optional[str] = None
    uri: Optional[str] = None


class Category(BaseModel):
    term: str
    label: Optional[str] = None
    scheme: Optional[str] = None


class Image(BaseModel):
    """
    Channel image.

    Every sub-field is optional here so that an incomplete image reaches the
    renderer, which reports the missing sub-field by name.
    """

    uri: Optional[str] = None
    link: Optional[str] = None
    title: Optional[str] = None
    height: Optional[Union[StrictInt, StrictStr]] = None
    width: Optional[Union[StrictInt, StrictStr]] = None
    description: Optional[Union[StrictStr, StrictInt]] = None


class FeedDescriptor(BaseModel):
    """
    In-memory description of a feed.

    ``None`` (or an empty collection) means the field is absent; an empty
    string is a present but empty value and is validated as such.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    title: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    encoding: Optional[str] = None
    date_modified: Optional[datetime] = None
    last_build_date: Optional[datetime] = None
    generator: Optional[Generator] = None
    language: Optional[str] = None
    feed_links: Dict[str, str] = Field(default_factory=dict)
    base_url: Optional[str] = None
    authors: List[Author] = Field(default_factory=list)
    copyright: Optional[str] = None
    categories: List[Category] = Field(default_factory=list)
    hubs: List[str] = Field(default_factory=list)
    image: Optional[Image] = None

    def set_generator(self, name: str, version: Optional[str] = None, uri: Optional[str] = None) -> None:
        self.generator = Generator(name=name, version=version, uri=uri)

    def set_feed_link(self, url: str, type: str) -> None:
        """
        Set the URL where the feed is published in the given format.

        Args:
            url: Location of the feed document
            type: One of "atom", "rss", "rdf" (case-insensitive)
        """
        feed_type = type.lower()
        if feed_type not in FEED_LINK_TYPES:
            raise ValueError(f"Unsupported feed link type '{type}', expected one of {FEED_LINK_TYPES}")
        self.feed_links = {**self.feed_links, feed_type: url}

    def add_author(self, author: Union[Author, Mapping[str, Any]]) -> None:
        self.authors = [*self.authors, Author.model_validate(author)]

    def add_authors(self, authors: Iterable[Union[Author, Mapping[str, Any]]]) -> None:
        for author in authors:
            self.add_author(author)

    def add_category(self, category: Union[Category, Mapping[str, Any]]) -> None:
        self.categories = [*self.categories, Category.model_validate(category)]

    def add_categories(self, categories: Iterable[Union[Category, Mapping[str, Any]]]) -> None:
        for category in categories:
            self.add_category(category)

    def add_hub(self, url: str) -> None:
        self.hubs = [*self.hubs, url]

    def add_hubs(self, urls: Iterable[str]) -> None:
        for url in urls:
            self.add_hub(url)

    def remove(self, field: str) -> None:
        """Reset a field to its absent state."""
        info = type(self).model_fields.get(field)
        if info is None:
            raise KeyError(f"Unknown feed field '{field}'")
        setattr(self, field, info.get_default(call_default_factory=True))
