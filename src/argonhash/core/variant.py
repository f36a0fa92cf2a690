"""Variant detection from the prefix of a PHC-encoded Argon2 hash."""

from __future__ import annotations

from argonhash.config import Variant
from argonhash.errors import InvalidVariantError

# "$argon2id" must be tested before its prefix "$argon2i".
_PREFIXES = (
    (b"$argon2id", Variant.ID),
    (b"$argon2i", Variant.I),
    (b"$argon2d", Variant.D),
)


def parse_variant(encoded_hash: bytes | bytearray | memoryview | str | None) -> Variant:
    """Return the variant named by an encoded hash's ``$argon2<variant>`` prefix.

    Only the prefix is inspected; the version, cost parameters, salt and
    output are left to the primitive.

    Raises:
        InvalidVariantError: If the input is empty or the prefix is unknown.
    """
    if not encoded_hash:
        raise InvalidVariantError()

    if isinstance(encoded_hash, str):
        data = encoded_hash.encode("utf-8")
    else:
        data = bytes(encoded_hash)

    for prefix, variant in _PREFIXES:
        if data.startswith(prefix):
            return variant
    raise InvalidVariantError()
