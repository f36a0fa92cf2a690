"""argonhash — salted Argon2 password hashing and verification for Python."""

__version__ = "0.1.0"

from argonhash.config import (
    Argon2Config,
    Option,
    Variant,
    Version,
    apply_options,
    default_config,
    hash_length,
    iterations,
    memory_kb,
    parallelism,
    salt_length,
    variant,
    version,
)
from argonhash.core.primitive import CffiPrimitive, Primitive, Status
from argonhash.core.randomness import RandomSource, SystemRandomSource
from argonhash.core.variant import parse_variant
from argonhash.errors import (
    EmptyHashError,
    EmptyInputError,
    HashError,
    InvalidVariantError,
    NotConfiguredError,
    PrimitiveError,
)
from argonhash.hasher import Argon2Hasher, Hasher, create_hasher

__all__ = [
    "Argon2Config",
    "Argon2Hasher",
    "CffiPrimitive",
    "EmptyHashError",
    "EmptyInputError",
    "HashError",
    "Hasher",
    "InvalidVariantError",
    "NotConfiguredError",
    "Option",
    "Primitive",
    "PrimitiveError",
    "RandomSource",
    "Status",
    "SystemRandomSource",
    "Variant",
    "Version",
    "apply_options",
    "create_hasher",
    "default_config",
    "hash_length",
    "iterations",
    "memory_kb",
    "parallelism",
    "parse_variant",
    "salt_length",
    "variant",
    "version",
]
