"""Exceptions raised by the URL shortener.

All of them derive from ``ValueError`` so callers that only care about
"bad input" can keep catching ``ValueError``.

Classes:
    ShortenerError: Base class.
    InvalidURLError: The submitted URL is not a well-formed absolute URL.
    InvalidShortcodeError: The shortcode does not match ``^[a-zA-Z0-9]{1,20}$``.
    InvalidValidityError: The validity is too large to give an expiry.
    DuplicateShortcodeError: The shortcode is already in the url map.
    ShortcodeNotFoundError: The shortcode is missing or its entry has expired.
    BatchSizeError: The batch is empty or larger than the configured maximum.
    StoreError: The persisted url map cannot be read or parsed.
"""


class ShortenerError(ValueError):
    """Base class for URL shortener errors."""

    pass


class InvalidURLError(ShortenerError):
    """Raised when a submitted URL fails validation."""

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"Invalid URL: {url}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidShortcodeError(ShortenerError):
    """Raised when a shortcode fails the format rule."""

    def __init__(self, shortcode: str, reason: str = ""):
        self.shortcode = shortcode
        self.reason = reason
        message = f"Invalid shortcode: {shortcode}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidValidityError(ShortenerError):
    """Raised when a validity is too large to give an expiry."""

    def __init__(self, validity, reason: str = ""):
        self.validity = validity
        self.reason = reason
        message = f"Invalid validity: {validity}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DuplicateShortcodeError(ShortenerError):
    """Raised when a shortcode is already in use."""

    def __init__(self, shortcode: str):
        self.shortcode = shortcode
        super().__init__(f"Shortcode already in use: {shortcode}")


class ShortcodeNotFoundError(ShortenerError):
    """Raised when a shortcode is unknown or expired.

    Missing and expired entries share one message.
    """

    def __init__(self, shortcode: str):
        self.shortcode = shortcode
        super().__init__("Short URL expired or not found")


class BatchSizeError(ShortenerError):
    """Raised when a batch has no entries or too many."""

    pass


class StoreError(ShortenerError):
    """Raised when the url map document is unreadable."""

    pass
