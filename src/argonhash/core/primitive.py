"""Argon2 primitive: the key-derivation engine behind the hasher, with pluggable backends."""

from __future__ import annotations

import enum
from typing import Protocol, runtime_checkable

from argon2.low_level import error_to_str, ffi, lib

from argonhash.config import Variant, Version

_UINT32_MAX = 0xFFFFFFFF


class Status(enum.IntEnum):
    """Status codes returned by the reference Argon2 library (``Argon2_ErrorCodes``).

    Backends may return codes outside this set; they are passed through
    ``Primitive.status_message`` unchanged.
    """

    OK = 0
    OUTPUT_PTR_NULL = -1
    OUTPUT_TOO_SHORT = -2
    OUTPUT_TOO_LONG = -3
    PWD_TOO_SHORT = -4
    PWD_TOO_LONG = -5
    SALT_TOO_SHORT = -6
    SALT_TOO_LONG = -7
    AD_TOO_SHORT = -8
    AD_TOO_LONG = -9
    SECRET_TOO_SHORT = -10
    SECRET_TOO_LONG = -11
    TIME_TOO_SMALL = -12
    TIME_TOO_LARGE = -13
    MEMORY_TOO_LITTLE = -14
    MEMORY_TOO_MUCH = -15
    LANES_TOO_FEW = -16
    LANES_TOO_MANY = -17
    PWD_PTR_MISMATCH = -18
    SALT_PTR_MISMATCH = -19
    SECRET_PTR_MISMATCH = -20
    AD_PTR_MISMATCH = -21
    MEMORY_ALLOCATION_ERROR = -22
    FREE_MEMORY_CBK_NULL = -23
    ALLOCATE_MEMORY_CBK_NULL = -24
    INCORRECT_PARAMETER = -25
    INCORRECT_TYPE = -26
    OUT_PTR_MISMATCH = -27
    THREADS_TOO_FEW = -28
    THREADS_TOO_MANY = -29
    MISSING_ARGS = -30
    ENCODING_FAIL = -31
    DECODING_FAIL = -32
    THREAD_FAIL = -33
    DECODING_LENGTH_FAIL = -34
    VERIFY_MISMATCH = -35


@runtime_checkable
class Primitive(Protocol):
    """Protocol for Argon2 backends.

    Implementations must be safe to call from several threads at once.
    Failures are reported as status codes, never raised.
    """

    def encoded_length(
        self,
        iterations: int,
        memory_kb: int,
        parallelism: int,
        salt_length: int,
        hash_length: int,
        variant: Variant,
    ) -> int:
        """Return the buffer size needed for the encoded hash, NUL terminator included."""
        ...

    def derive(
        self,
        iterations: int,
        memory_kb: int,
        parallelism: int,
        secret: bytes,
        salt: bytes,
        hash_length: int,
        encoded_length: int,
        variant: Variant,
        version: Version,
    ) -> tuple[int, bytes]:
        """Hash ``secret`` with ``salt`` into an encoded-hash buffer of ``encoded_length`` bytes.

        Returns:
            Tuple of (status, buffer). The buffer may carry trailing NUL padding.
        """
        ...

    def verify(self, encoded_hash: bytes, secret: bytes, variant: Variant) -> int:
        """Check ``secret`` against ``encoded_hash`` and return a status code."""
        ...

    def status_message(self, status: int) -> str:
        """Return the human-readable message for a status code."""
        ...


def _fits_uint32(*values: int) -> bool:
    return all(0 <= value <= _UINT32_MAX for value in values)


class CffiPrimitive:
    """Backend using the reference C implementation bundled with argon2-cffi.

    Every call allocates its own cffi buffers; the C library keeps no
    global state, so one instance can be shared across threads.
    """

    def encoded_length(
        self,
        iterations: int,
        memory_kb: int,
        parallelism: int,
        salt_length: int,
        hash_length: int,
        variant: Variant,
    ) -> int:
        if not _fits_uint32(iterations, memory_kb, parallelism, salt_length, hash_length):
            return 0
        return lib.argon2_encodedlen(
            iterations, memory_kb, parallelism, salt_length, hash_length, int(variant),
        )

    def derive(
        self,
        iterations: int,
        memory_kb: int,
        parallelism: int,
        secret: bytes,
        salt: bytes,
        hash_length: int,
        encoded_length: int,
        variant: Variant,
        version: Version,
    ) -> tuple[int, bytes]:
        # Out-of-range values would overflow the uint32_t arguments in cffi.
        if not _fits_uint32(iterations, memory_kb, parallelism, hash_length, int(version)):
            return Status.INCORRECT_PARAMETER, b""
        if encoded_length <= 0:
            return Status.OUTPUT_TOO_SHORT, b""

        buf = ffi.new("char[]", encoded_length)
        status = lib.argon2_hash(
            iterations,
            memory_kb,
            parallelism,
            ffi.new("uint8_t[]", secret),
            len(secret),
            ffi.new("uint8_t[]", salt),
            len(salt),
            ffi.NULL,
            hash_length,
            buf,
            encoded_length,
            int(variant),
            int(version),
        )
        return status, ffi.buffer(buf)[:]

    def verify(self, encoded_hash: bytes, secret: bytes, variant: Variant) -> int:
        return lib.argon2_verify(
            ffi.new("char[]", encoded_hash),
            ffi.new("uint8_t[]", secret),
            len(secret),
            int(variant),
        )

    def status_message(self, status: int) -> str:
        return error_to_str(status)
