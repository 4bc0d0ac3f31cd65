class NewsHeadlinesError(Exception):
    """Base class for every error raised by news_headlines."""


class NetworkError(NewsHeadlinesError):
    """Raised when a page cannot be fetched (connection, HTTP status or body read)."""


class UnsupportedSiteError(NewsHeadlinesError):
    """Raised when a URL matches none of the known site rules."""


class ParseError(NewsHeadlinesError):
    """Raised when a fetched document cannot be processed."""


class SelectorError(ParseError):
    """Raised when an extraction rule's CSS selector cannot be compiled."""


class EmptyInputError(NewsHeadlinesError):
    """Raised when an average is requested over zero headlines."""


class ScoringError(NewsHeadlinesError):
    """Raised when a sentiment provider fails to score a headline."""


class ConfigError(NewsHeadlinesError):
    """Raised when an environment setting cannot be interpreted."""
