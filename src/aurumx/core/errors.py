"""Price feed error taxonomy.

Feed errors never reach the presentation layer. The distributor absorbs
them: transient and malformed-data failures are retried with backoff,
and an exhausted retry budget is logged and leaves the distributor idle.
"""


class FeedError(Exception):
    """Base class for price feed failures."""


class TransientFeedError(FeedError):
    """Network, timeout or rate-limit failure from the price feed."""


class MalformedDataError(TransientFeedError):
    """Feed returned a bar with missing or inconsistent fields."""


class ExhaustedRetryError(FeedError):
    """All backoff attempts were consumed without a successful fetch."""

    def __init__(self, attempts: int, last_error: BaseException | None = None) -> None:
        self.attempts = attempts
        self.last_error = last_error
        message = f"Price feed unavailable after {attempts} attempts"
        if last_error is not None:
            message += f": {last_error}"
        super().__init__(message)
