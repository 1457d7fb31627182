"""
Errors raised while rendering a feed.
"""


class FeedWriterError(Exception):
    """Base class for all rendering errors."""


class FeedValidationError(FeedWriterError):
    """A channel-level field cannot be expressed in the target format."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class MissingRequiredField(FeedValidationError):
    """A mandatory field is absent or empty."""

    def __init__(self, field: str, reason: str = "required field is missing or empty"):
        super().__init__(field, reason)


class InvalidField(FeedValidationError):
    """A present field violates a type, range or non-emptiness rule."""


class EncodingError(FeedWriterError):
    """Text cannot be represented in the requested charset."""

    def __init__(self, field: str, encoding: str):
        self.field = field
        self.encoding = encoding
        super().__init__(f"{field}: text cannot be represented in {encoding}")
