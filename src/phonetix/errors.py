"""Error taxonomy for phonetix.

Every error raised by the library derives from :class:`PhoneticsError`.
Value errors also derive from the builtin :class:`ValueError` so callers
can keep catching the builtin.

Each class carries a :class:`ErrorKind` tag. Kinds form a chain from the
most specific to the generic one, and :meth:`PhoneticsError.narrow`
converts an error into a more generic kind while keeping its message.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Tag identifying the kind of a phonetics error."""

    GENERIC = "generic"
    VALUE = "value"
    INDEX_OUT_OF_RANGE = "index-out-of-range"
    INVALID_FEATURE_VALUE = "invalid-feature-value"
    IMPOSSIBLE_ARTICULATION = "impossible-articulation"
    DECODING_FAILED = "decoding-failed"
    ENCODING_FAILED = "encoding-failed"


class PhoneticsError(Exception):
    """Generic phonetics error.

    Attributes:
        message: Human readable description, possibly empty.
    """

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def narrow(self, kind: ErrorKind | type[PhoneticsError]) -> PhoneticsError:
        """Convert this error into a more generic kind.

        Args:
            kind: Target kind, either an ErrorKind or an error class.

        Returns:
            A new error of the target class with the same message.

        Raises:
            TypeError: If the target is not this error's class or one of
                its phonetics base classes.
        """
        target = error_class(kind) if isinstance(kind, ErrorKind) else kind
        if not (isinstance(target, type) and issubclass(target, PhoneticsError)):
            raise TypeError(f"Not a phonetics error kind: {kind!r}")
        if not isinstance(self, target):
            raise TypeError(
                f"Cannot convert {type(self).__name__} to {target.__name__}: "
                "only conversion to a more generic kind is allowed"
            )
        return target(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class PhoneticValueError(PhoneticsError, ValueError):
    """An argument is outside the domain an operation accepts."""

    kind = ErrorKind.VALUE


class IndexOutOfRange(PhoneticValueError, IndexError):
    """Positional access outside a sequence's bounds."""

    kind = ErrorKind.INDEX_OUT_OF_RANGE


class InvalidFeatureValue(PhoneticValueError):
    """A scalar feature would leave its declared domain."""

    kind = ErrorKind.INVALID_FEATURE_VALUE


class ImpossibleArticulation(PhoneticValueError):
    """A feature combination violates an articulation rule.

    Attributes:
        rule: Name of the violated rule, when known.
    """

    kind = ErrorKind.IMPOSSIBLE_ARTICULATION

    def __init__(self, message: str = "", rule: str | None = None) -> None:
        super().__init__(message)
        self.rule = rule


class DecodingFailed(PhoneticValueError):
    """A transcription could not be parsed.

    Attributes:
        position: Character offset where decoding stopped, when known.
    """

    kind = ErrorKind.DECODING_FAILED

    def __init__(self, message: str = "", position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class EncodingFailed(PhoneticValueError):
    """A feature combination has no symbol in the requested notation."""

    kind = ErrorKind.ENCODING_FAILED


_CLASSES: dict[ErrorKind, type[PhoneticsError]] = {
    cls.kind: cls
    for cls in (
        PhoneticsError,
        PhoneticValueError,
        IndexOutOfRange,
        InvalidFeatureValue,
        ImpossibleArticulation,
        DecodingFailed,
        EncodingFailed,
    )
}


def error_class(kind: ErrorKind) -> type[PhoneticsError]:
    """Return the exception class implementing an error kind."""
    return _CLASSES[kind]
