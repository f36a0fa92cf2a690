"""Injectable secure random source for salts."""

import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for cryptographically secure byte sources.

    Implementations must be safe for concurrent callers and must never hand
    the same bytes to two callers. Errors are raised to the caller as-is.
    """

    def read(self, size: int) -> bytes:
        """Return exactly ``size`` random bytes."""
        ...


class SystemRandomSource:
    """Operating system CSPRNG via :func:`secrets.token_bytes`.

    ``os.urandom`` keeps no Python-level state and is safe to call from
    multiple threads, so no locking is needed.
    """

    def read(self, size: int) -> bytes:
        return secrets.token_bytes(size)
