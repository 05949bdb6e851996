# /src/pushstream/errors.py
# Error helpers - failures travel as error events, not exceptions


class StreamError(Exception):
    """Raised at the consumer edge when a recorded stream ended in an error event."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def describe_failure(exc: BaseException) -> str:
    """Render an exception as the message of an error event."""
    text = str(exc)
    return text if text else type(exc).__name__
