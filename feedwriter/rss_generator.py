"""
RSS 2.0 renderer module.
"""

import codecs
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Iterator, Optional, Tuple
from xml.dom import minidom
from xml.etree.ElementTree import Element, SubElement, tostring

from .config import RenderOptions
from .defaults import resolve_defaults
from .errors import EncodingError, InvalidField
from .extensions import ExtensionRegistry
from .logging_config import get_logger
from .models import FeedDescriptor, Generator, Image
from .validation import validate


logger = get_logger(__name__)

ATOM_NS = "http://www.w3.org/2005/Atom"
DC_NS = "http://purl.org/dc/elements/1.1/"
XML_BASE = "{http://www.w3.org/XML/1998/namespace}base"

RSS_MIME_TYPE = "application/rss+xml"

# Characters outside the XML 1.0 Char production
_ILLEGAL_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


@dataclass(frozen=True, eq=False)
class RenderedDocument:
    """A validated, assembled RSS document ready for serialization."""

    root: Element
    encoding: str
    descriptor: FeedDescriptor
    pretty: bool = True
    indent: str = "  "

    @property
    def channel(self) -> Element:
        return self.root.find("channel")

    def serialize(self) -> bytes:
        return serialize(self)


def format_rfc822(value: datetime) -> str:
    """
    Format a timestamp as an RFC 822 date.

    Naive datetimes are taken to be UTC; aware ones keep their offset.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value)


def format_generator(generator: Generator) -> str:
    """Render a generator as "<name> <version> (<uri>)", skipping absent parts."""
    text = generator.name
    if generator.version:
        text += f" {generator.version}"
    if generator.uri:
        text += f" ({generator.uri})"
    return text


_UNICODE_FAMILIES = ("utf-8", "utf-16", "utf-32")


def is_unicode_encoding(encoding: str) -> bool:
    return codecs.lookup(encoding).name.startswith(_UNICODE_FAMILIES)


def _projected_text(feed: FeedDescriptor) -> Iterator[Tuple[str, str]]:
    """(field, text) for every value that ends up in the document."""
    yield "title", feed.title
    yield "link", feed.link
    yield "description", feed.description
    for field in ("language", "copyright", "base_url"):
        value = getattr(feed, field)
        if value is not None:
            yield field, value
    yield "generator", format_generator(feed.generator)
    if feed.image is not None:
        for field in ("uri", "title", "link", "description"):
            value = getattr(feed.image, field)
            if value is not None:
                yield f"image.{field}", str(value)
    for index, category in enumerate(feed.categories):
        yield f"categories[{index}].term", category.term
        if category.scheme is not None:
            yield f"categories[{index}].scheme", category.scheme
    if "rss" in feed.feed_links:
        yield "feed_links.rss", feed.feed_links["rss"]
    for index, author in enumerate(feed.authors):
        yield f"authors[{index}].name", author.name
    for index, hub in enumerate(feed.hubs):
        yield f"hubs[{index}]", hub


def check_text(feed: FeedDescriptor) -> None:
    """
    Make sure every projected value can be written in the feed's encoding.

    Raises:
        InvalidField: Text contains characters XML cannot carry
        EncodingError: Text cannot be represented in a legacy charset
    """
    unicode_capable = is_unicode_encoding(feed.encoding)
    for field, text in _projected_text(feed):
        if _ILLEGAL_XML_CHARS.search(text):
            raise InvalidField(field, "contains characters not allowed in XML")
        # Parsers normalize CR to LF, so it cannot be read back
        if "\r" in text:
            raise InvalidField(field, "contains a carriage return")
        if unicode_capable:
            continue
        try:
            text.encode(feed.encoding)
        except UnicodeEncodeError:
            raise EncodingError(field, feed.encoding) from None


def _add_text(parent: Element, tag: str, text: str) -> Element:
    element = SubElement(parent, tag)
    element.text = text
    return element


def _add_image(channel: Element, image: Image) -> None:
    """Add the channel image; sub-elements follow the RSS 2.0 order."""
    image_el = SubElement(channel, "image")
    _add_text(image_el, "url", image.uri)
    _add_text(image_el, "title", image.title)
    _add_text(image_el, "link", image.link)
    if image.width is not None:
        _add_text(image_el, "width", str(image.width))
    if image.height is not None:
        _add_text(image_el, "height", str(image.height))
    if image.description is not None:
        _add_text(image_el, "description", image.description)


def _add_atom_link(channel: Element, href: str, rel: str, type: Optional[str] = None) -> None:
    link = SubElement(channel, "atom:link")
    link.set("rel", rel)
    if type:
        link.set("type", type)
    link.set("href", href)


def build_document(feed: FeedDescriptor) -> Element:
    """
    Assemble the element tree for a resolved, validated descriptor.

    Args:
        feed: Descriptor that has passed validation and default resolution

    Returns:
        The ``rss`` root element with a single ``channel``
    """
    self_link = feed.feed_links.get("rss")

    rss = Element("rss", version="2.0")
    if feed.base_url:
        rss.set(XML_BASE, feed.base_url)
    # Prefixes are literal attributes; nothing is added to the global namespace map
    if self_link or feed.hubs:
        rss.set("xmlns:atom", ATOM_NS)
    if feed.authors:
        rss.set("xmlns:dc", DC_NS)

    channel = SubElement(rss, "channel")

    _add_text(channel, "title", feed.title)
    _add_text(channel, "link", feed.link)
    _add_text(channel, "description", feed.description)

    if feed.language is not None:
        _add_text(channel, "language", feed.language)
    if feed.copyright is not None:
        _add_text(channel, "copyright", feed.copyright)
    if feed.last_build_date is not None:
        _add_text(channel, "lastBuildDate", format_rfc822(feed.last_build_date))

    _add_text(channel, "generator", format_generator(feed.generator))

    if feed.image is not None:
        _add_image(channel, feed.image)

    # RSS categories carry no label: readers derive it from the term
    for category in feed.categories:
        category_el = _add_text(channel, "category", category.term)
        if category.scheme is not None:
            category_el.set("domain", category.scheme)

    if self_link:
        _add_atom_link(channel, self_link, "self", RSS_MIME_TYPE)

    # Only the name is projected; RSS has no place for author email or uri
    for author in feed.authors:
        _add_text(channel, "dc:creator", author.name)

    for hub in feed.hubs:
        _add_atom_link(channel, hub, "hub")

    if feed.date_modified is not None:
        _add_text(channel, "pubDate", format_rfc822(feed.date_modified))

    return rss


class RssRenderer:
    """
    Renders a feed descriptor as an RSS 2.0 document.

    The renderer is bound to one descriptor and never modifies it. Each call
    to ``render`` validates from scratch; nothing is produced on failure.
    """

    feed_type = "rss"

    def __init__(
        self,
        descriptor: FeedDescriptor,
        options: Optional[RenderOptions] = None,
        extensions: Optional[ExtensionRegistry] = None,
    ):
        self._descriptor = descriptor
        self.options = options or RenderOptions()
        self.extensions = extensions if extensions is not None else ExtensionRegistry()

    @property
    def descriptor(self) -> FeedDescriptor:
        return self._descriptor

    def render(self) -> RenderedDocument:
        """
        Validate the descriptor and assemble the document.

        Returns:
            RenderedDocument holding the element tree and resolved encoding

        Raises:
            MissingRequiredField: A mandatory channel field is absent or empty
            InvalidField: A present field breaks an RSS rule
            EncodingError: Text cannot be written in the requested charset
        """
        validate(self._descriptor)
        feed = resolve_defaults(self._descriptor)
        check_text(feed)

        ignored = sorted(fmt for fmt in feed.feed_links if fmt != self.feed_type)
        if ignored:
            logger.debug("Ignoring feed links for other formats: %s", ", ".join(ignored))

        root = build_document(feed)
        channel = root.find("channel")
        for name, hook in self.extensions.for_format(self.feed_type):
            logger.debug("Running extension %s", name)
            hook(feed, root, channel)

        logger.debug("Rendered RSS channel '%s' (%s)", feed.title, feed.encoding)
        return RenderedDocument(
            root=root,
            encoding=feed.encoding,
            descriptor=feed,
            pretty=self.options.pretty,
            indent=self.options.indent,
        )

    def save_xml(self) -> bytes:
        """Render and serialize in one step."""
        return serialize(self.render())


def render(
    descriptor: FeedDescriptor,
    options: Optional[RenderOptions] = None,
    extensions: Optional[ExtensionRegistry] = None,
) -> RenderedDocument:
    return RssRenderer(descriptor, options=options, extensions=extensions).render()


def serialize(document: RenderedDocument) -> bytes:
    """
    Serialize a rendered document.

    Args:
        document: Output of ``render``

    Returns:
        XML bytes in the document's encoding, with a matching declaration
    """
    if not document.pretty:
        return tostring(document.root, encoding=document.encoding, xml_declaration=True)

    # Pretty print XML
    xml_str = tostring(document.root, encoding="unicode")
    dom = minidom.parseString(xml_str)
    return dom.toprettyxml(indent=document.indent, encoding=document.encoding)
