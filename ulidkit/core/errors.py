"""Error kinds raised by the ULID codecs and generator."""

from ulidkit.utils.timestamp import format_timestamp


class UlidError(Exception):
    """Base error with timestamp and context for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def to_dict(self):
        return {"error": type(self).__name__, "detail": str(self), "context": self.context}


class InvalidUlidError(UlidError):
    """Malformed text handed to a decode or convert operation."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = repr(value)[:64]
        super().__init__(message, context=context, **kwargs)


class InvalidLengthError(UlidError):
    """Binary input that is not exactly 16 bytes."""

    def __init__(self, message, length=None, **kwargs):
        context = kwargs.pop("context", {})
        if length is not None:
            context["length"] = length
        super().__init__(message, context=context, **kwargs)


class OutOfRangeError(UlidError):
    """Timestamp outside the 48-bit millisecond range."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)


class MonotonicOverflowError(UlidError):
    """Randomness exhausted within a single millisecond."""

    def __init__(self, message, timestamp=None, **kwargs):
        context = kwargs.pop("context", {})
        if timestamp is not None:
            context["timestamp"] = timestamp
        super().__init__(message, context=context, **kwargs)
