class MLBNewsError(Exception):
    """Base class for all mlb_news errors."""


class InvalidRangeError(MLBNewsError, ValueError):
    """Raised when the requested date range is inconsistent (e.g. start after end)."""


class RangeTooLargeError(MLBNewsError, ValueError):
    """Raised when the requested date range spans more than 365 days."""


class SourceFetchError(MLBNewsError):
    """Raised when a feed cannot be fetched (network, timeout, HTTP status)."""


class FeedParseError(MLBNewsError):
    """Raised when a fetched document is not a recognizable RSS/Atom feed."""


class ItemParseError(MLBNewsError):
    """Raised when a feed entry cannot be turned into an article."""
