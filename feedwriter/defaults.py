"""
Default resolution applied before a feed is assembled.
"""

from .models import Category, FeedDescriptor, Generator
from .version import TOOLKIT_NAME, TOOLKIT_URI, __version__


DEFAULT_ENCODING = "UTF-8"


def default_generator() -> Generator:
    """Generator record identifying this toolkit."""
    return Generator(name=TOOLKIT_NAME, version=__version__, uri=TOOLKIT_URI)


def _with_label(category: Category) -> Category:
    if category.label is not None:
        return category
    return category.model_copy(update={"label": category.term})


def resolve_defaults(descriptor: FeedDescriptor) -> FeedDescriptor:
    """
    Fill in the defaultable fields of a descriptor.

    The input is left untouched; a resolved copy is returned. Resolving an
    already resolved descriptor yields an equal descriptor.

    Args:
        descriptor: Feed as populated by the caller

    Returns:
        Copy with encoding, generator and category labels filled in.
        Language has no default and is left as is.
    """
    resolved = descriptor.model_copy(deep=True)
    if resolved.encoding is None:
        resolved.encoding = DEFAULT_ENCODING
    if resolved.generator is None:
        resolved.generator = default_generator()
    if any(category.label is None for category in resolved.categories):
        resolved.categories = [_with_label(category) for category in resolved.categories]
    return resolved
