"""Error types. Every failure raised by the library derives from HashError."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argonhash.core.primitive import Primitive


class HashError(Exception):
    """Base hashing error with a machine-readable error code."""

    def __init__(self, message: str, code: str, **extra):
        self.message = message
        self.code = code
        self.extra = extra
        super().__init__(message)


class EmptyInputError(HashError):
    """The secret passed to encode or verify is missing or empty."""

    def __init__(self) -> None:
        super().__init__("empty input specified", code="empty_input")


class EmptyHashError(HashError):
    """The encoded hash passed to verify is missing or empty."""

    def __init__(self) -> None:
        super().__init__("empty hash specified", code="empty_hash")


class NotConfiguredError(HashError):
    """The hasher has no configuration, or cannot generate a salt with it."""

    def __init__(self) -> None:
        super().__init__("instance is not configured properly", code="not_configured")


class InvalidVariantError(HashError):
    """The encoded hash does not start with a known ``$argon2<variant>`` token."""

    def __init__(self) -> None:
        super().__init__("invalid argon2 variant", code="invalid_variant")


class PrimitiveError(HashError):
    """The Argon2 primitive reported a failure status."""

    def __init__(self, message: str, status: int) -> None:
        self.status = status
        super().__init__(message, code="primitive_failure", status=status)


def primitive_error(primitive: Primitive, status: int) -> PrimitiveError:
    """Translate a primitive status code into a PrimitiveError with its canonical message.

    All non-success, non-mismatch statuses pass through here.
    """
    return PrimitiveError(primitive.status_message(status), status=status)
