"""
tests.conftest - Shared fixtures and a minimal RSS reader for round trips
"""
import re
from email.utils import parsedate_to_datetime
from xml.etree import ElementTree

import pytest

from feedwriter import FeedDescriptor

ATOM_LINK = "{http://www.w3.org/2005/Atom}link"
DC_CREATOR = "{http://purl.org/dc/elements/1.1/}creator"
XML_BASE = "{http://www.w3.org/XML/1998/namespace}base"

_DECLARED_ENCODING = re.compile(rb"""^\s*<\?xml[^>]*\bencoding=["']([A-Za-z0-9._-]+)["']""")


class FeedReader:
    """Reads back the channel fields written by the RSS renderer"""

    def __init__(self, data: bytes):
        self.data = data
        self.root = ElementTree.fromstring(data)
        self.channel = self.root.find("channel")

    def _text(self, tag):
        return self.channel.findtext(tag)

    def _date(self, tag):
        text = self._text(tag)
        return parsedate_to_datetime(text) if text is not None else None

    def _atom_links(self, rel):
        return [link.get("href") for link in self.channel.findall(ATOM_LINK) if link.get("rel") == rel]

    @property
    def encoding(self):
        match = _DECLARED_ENCODING.match(self.data)
        return match.group(1).decode("ascii") if match else None

    @property
    def title(self):
        return self._text("title")

    @property
    def description(self):
        return self._text("description")

    @property
    def link(self):
        return self._text("link")

    @property
    def language(self):
        return self._text("language")

    @property
    def copyright(self):
        return self._text("copyright")

    @property
    def generator(self):
        return self._text("generator")

    @property
    def date_modified(self):
        return self._date("pubDate")

    @property
    def last_build_date(self):
        return self._date("lastBuildDate")

    @property
    def base_url(self):
        return self.root.get(XML_BASE)

    @property
    def feed_link(self):
        links = self._atom_links("self")
        return links[0] if links else None

    @property
    def hubs(self):
        return self._atom_links("hub")

    @property
    def authors(self):
        return [{"name": creator.text} for creator in self.channel.findall(DC_CREATOR)]

    @property
    def categories(self):
        return [
            {"term": category.text, "label": category.text, "scheme": category.get("domain")}
            for category in self.channel.findall("category")
        ]

    @property
    def image(self):
        image = self.channel.find("image")
        if image is None:
            return None
        fields = {"url": "uri", "link": "link", "title": "title", "height": "height", "width": "width", "description": "description"}
        return {key: image.findtext(tag) for tag, key in fields.items() if image.find(tag) is not None}


@pytest.fixture
def valid_feed():
    return FeedDescriptor(
        title="This is a test feed.",
        description="This is a test description.",
        link="http://www.example.com",
    )


@pytest.fixture
def read_feed():
    return FeedReader
