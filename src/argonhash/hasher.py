"""Salted Argon2 encode and verify behind a small Hasher interface.

Argon2Hasher is framework-agnostic and synchronous. One instance is meant to
be created at startup and shared by all threads: its config is frozen and the
default primitive and random source keep no shared mutable state.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from argonhash.config import Argon2Config, Option, apply_options, default_config
from argonhash.core.primitive import CffiPrimitive, Primitive, Status
from argonhash.core.randomness import RandomSource, SystemRandomSource
from argonhash.core.variant import parse_variant
from argonhash.errors import (
    EmptyHashError,
    EmptyInputError,
    NotConfiguredError,
    primitive_error,
)

logger = logging.getLogger("argonhash.hasher")

Data = bytes | bytearray | memoryview | str


@runtime_checkable
class Hasher(Protocol):
    """A hashing algorithm that encodes secrets and verifies them against encoded hashes."""

    def encode(self, secret: Data) -> str:
        """Return the encoded hash of ``secret``. Raises HashError on failure."""
        ...

    def verify(self, secret: Data, encoded_hash: Data) -> bool:
        """Return True if ``encoded_hash`` was produced from ``secret``, False otherwise.

        Raises HashError if the check itself cannot be performed.
        """
        ...


def _to_bytes(value: Data | None) -> bytes:
    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


class Argon2Hasher:
    """Hasher backed by Argon2.

    Args:
        config: Parameters used for new hashes. None leaves the hasher unconfigured.
        primitive: Argon2 backend (default CffiPrimitive).
        random_source: Salt source (default SystemRandomSource).
    """

    def __init__(
        self,
        config: Argon2Config | None,
        *,
        primitive: Primitive | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self._config = config
        self._primitive = primitive or CffiPrimitive()
        self._random = random_source or SystemRandomSource()

    @property
    def config(self) -> Argon2Config | None:
        """Read-only access to the bound config."""
        return self._config

    def encode(self, secret: Data) -> str:
        """Hash a secret with a freshly generated salt.

        Returns:
            The PHC-encoded hash, e.g. ``$argon2id$v=19$m=65536,t=8,p=8$<salt>$<hash>``.

        Raises:
            NotConfiguredError: If the hasher has no config or a non-positive salt length.
            EmptyInputError: If the secret is empty.
            PrimitiveError: If Argon2 rejects the parameters or fails.
            Exception: Whatever the random source raises, unchanged.
        """
        config = self._config
        if config is None:
            raise NotConfiguredError()

        raw = _to_bytes(secret)
        if not raw:
            raise EmptyInputError()

        if config.salt_length <= 0:
            raise NotConfiguredError()

        try:
            salt = self._random.read(config.salt_length)
        except Exception:
            logger.warning("Salt generation failed")
            raise

        length = self._primitive.encoded_length(
            config.iterations,
            config.memory_kb,
            config.parallelism,
            config.salt_length,
            config.hash_length,
            config.variant,
        )
        status, buf = self._primitive.derive(
            config.iterations,
            config.memory_kb,
            config.parallelism,
            raw,
            salt,
            config.hash_length,
            length,
            config.variant,
            config.version,
        )
        if status != Status.OK:
            error = primitive_error(self._primitive, status)
            logger.debug("Argon2 hashing failed with status %d: %s", status, error.message)
            raise error

        return buf.rstrip(b"\x00").decode("ascii")

    def verify(self, secret: Data, encoded_hash: Data) -> bool:
        """Check a secret against an encoded hash.

        The variant embedded in the hash is used, not the configured one, so
        hashes produced under another variant still verify.

        Returns:
            True on match, False on a well-formed mismatch.

        Raises:
            NotConfiguredError: If the hasher has no config.
            EmptyInputError: If the secret is empty.
            EmptyHashError: If the encoded hash is empty.
            InvalidVariantError: If the hash does not start with a known variant.
            PrimitiveError: If the hash is malformed or Argon2 fails.
        """
        if self._config is None:
            raise NotConfiguredError()

        raw = _to_bytes(secret)
        if not raw:
            raise EmptyInputError()

        encoded = _to_bytes(encoded_hash)
        if not encoded:
            raise EmptyHashError()

        variant = parse_variant(encoded)

        status = self._primitive.verify(encoded, raw, variant)
        if status == Status.OK:
            return True
        if status == Status.VERIFY_MISMATCH:
            return False

        error = primitive_error(self._primitive, status)
        logger.debug("Argon2 verification failed with status %d: %s", status, error.message)
        raise error


def create_hasher(
    *options: Option,
    primitive: Primitive | None = None,
    random_source: RandomSource | None = None,
) -> Argon2Hasher:
    """Create an Argon2 hasher from the default config and the given options.

    Options apply in argument order; a later option overrides an earlier one
    on the same field.

    Example:
        hasher = create_hasher(parallelism(4), hash_length(32))
        encoded = hasher.encode("s3cret")
        assert hasher.verify("s3cret", encoded)
    """
    config = apply_options(default_config(), options)
    return Argon2Hasher(config, primitive=primitive, random_source=random_source)
