"""
RSS 2.0 channel rules.

Checks run in a fixed order so that the same descriptor always reports the
same first error: title, description, link, image, then everything else.
"""

import codecs
from typing import Iterator, List, Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError

from .errors import FeedValidationError, InvalidField, MissingRequiredField
from .models import FeedDescriptor, Image


IMAGE_MAX_HEIGHT = 400
IMAGE_MAX_WIDTH = 144

_URL_ADAPTER = TypeAdapter(AnyUrl)


def is_url(value) -> bool:
    """Whether value is a non-empty, syntactically valid absolute URL."""
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True


def parse_dimension(value) -> Optional[int]:
    """Integer value of an image dimension given as int or digit string, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


def _check_required(descriptor: FeedDescriptor) -> Iterator[FeedValidationError]:
    if not descriptor.title:
        yield MissingRequiredField("title")
    if not descriptor.description:
        yield MissingRequiredField("description")
    if not descriptor.link:
        yield MissingRequiredField("link")
    elif not is_url(descriptor.link):
        yield MissingRequiredField("link", "a valid URL is required")


def _check_dimension(name: str, value, maximum: int) -> Iterator[FeedValidationError]:
    number = parse_dimension(value)
    if number is None:
        yield InvalidField(f"image.{name}", "must be an integer")
    elif not 1 <= number <= maximum:
        yield InvalidField(f"image.{name}", f"must be between 1 and {maximum}")


def _check_image(image: Image) -> Iterator[FeedValidationError]:
    for name in ("uri", "link"):
        value = getattr(image, name)
        if not value:
            yield InvalidField(f"image.{name}", "required when an image is set")
        elif not is_url(value):
            yield InvalidField(f"image.{name}", "must be a valid URL")
    if not image.title:
        yield InvalidField("image.title", "required when an image is set")

    if image.height is not None:
        yield from _check_dimension("height", image.height, IMAGE_MAX_HEIGHT)
    if image.width is not None:
        yield from _check_dimension("width", image.width, IMAGE_MAX_WIDTH)
    if image.description is not None:
        if not isinstance(image.description, str) or not image.description:
            yield InvalidField("image.description", "must be a non-empty string")


def _check_optional(descriptor: FeedDescriptor) -> Iterator[FeedValidationError]:
    if descriptor.encoding is not None:
        try:
            "".encode(descriptor.encoding)
        except LookupError:
            yield InvalidField("encoding", f"unknown charset '{descriptor.encoding}'")
        else:
            # Expat cannot read UTF-7 documents back
            if codecs.lookup(descriptor.encoding).name == "utf-7":
                yield InvalidField("encoding", "UTF-7 is not supported by XML parsers")

    for field in ("language", "copyright"):
        if getattr(descriptor, field) == "":
            yield InvalidField(field, "must not be empty")

    if descriptor.base_url is not None and not is_url(descriptor.base_url):
        yield InvalidField("base_url", "must be a valid URL")

    rss_link = descriptor.feed_links.get("rss")
    if rss_link is not None and not is_url(rss_link):
        yield InvalidField("feed_links.rss", "must be a valid URL")

    for index, hub in enumerate(descriptor.hubs):
        if not is_url(hub):
            yield InvalidField(f"hubs[{index}]", "must be a valid URL")

    generator = descriptor.generator
    if generator is not None:
        if not generator.name:
            yield InvalidField("generator.name", "must not be empty")
        if generator.uri is not None and not is_url(generator.uri):
            yield InvalidField("generator.uri", "must be a valid URL")

    for index, author in enumerate(descriptor.authors):
        if not author.name:
            yield InvalidField(f"authors[{index}].name", "must not be empty")

    for index, category in enumerate(descriptor.categories):
        if not category.term:
            yield InvalidField(f"categories[{index}].term", "must not be empty")
        if category.scheme is not None and not is_url(category.scheme):
            yield InvalidField(f"categories[{index}].scheme", "must be a valid URL")


def collect_errors(descriptor: FeedDescriptor) -> List[FeedValidationError]:
    """
    Check a descriptor against the RSS 2.0 channel rules without raising.

    Args:
        descriptor: Feed to check

    Returns:
        Every violation found, in check order. Empty when the feed can be rendered.
    """
    errors = list(_check_required(descriptor))
    if descriptor.image is not None:
        errors.extend(_check_image(descriptor.image))
    errors.extend(_check_optional(descriptor))
    return errors


def validate(descriptor: FeedDescriptor) -> None:
    """Raise the first violation of the RSS 2.0 channel rules, if any."""
    errors = collect_errors(descriptor)
    if errors:
        raise errors[0]
