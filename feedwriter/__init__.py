"""feedwriter: render feed descriptors as RSS 2.0 documents."""

from .config import Config, RenderOptions, load_config
from .defaults import resolve_defaults
from .errors import EncodingError, FeedValidationError, FeedWriterError, InvalidField, MissingRequiredField
from .extensions import ExtensionRegistry
from .logging_config import get_logger, setup_logging
from .models import Author, Category, FeedDescriptor, Generator, Image
from .rss_generator import RenderedDocument, RssRenderer, render, serialize
from .validation import collect_errors, validate
from .version import DEFAULT_GENERATOR, __version__

__all__ = [
    "Author",
    "Category",
    "Config",
    "DEFAULT_GENERATOR",
    "EncodingError",
    "ExtensionRegistry",
    "FeedDescriptor",
    "FeedValidationError",
    "FeedWriterError",
    "Generator",
    "Image",
    "InvalidField",
    "MissingRequiredField",
    "RenderOptions",
    "RenderedDocument",
    "RssRenderer",
    "collect_errors",
    "get_logger",
    "load_config",
    "render",
    "resolve_defaults",
    "serialize",
    "setup_logging",
    "validate",
    "__version__",
]
