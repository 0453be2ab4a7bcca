class FeedFetchError(Exception):
    """Raised when an RSS/Atom feed cannot be fetched or parsed."""


class AggregationError(Exception):
    """Raised when the aggregation pipeline itself fails (not a single source)."""
