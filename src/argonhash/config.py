"""Argon2 parameter set and the options that build it."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any


class Variant(enum.IntEnum):
    """Argon2 algorithm family. Values match the reference library's ``argon2_type``."""

    D = 0
    I = 1  # noqa: E741
    ID = 2

    @classmethod
    def parse(cls, value: Variant | int | str) -> Variant:
        """Accept a member, its int value, or a name such as ``"id"`` / ``"argon2id"``."""
        if isinstance(value, str):
            name = value.strip().upper().removeprefix("ARGON2")
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Unknown Argon2 variant: '{value}'") from None
        return cls(value)


class Version(enum.IntEnum):
    """Argon2 algorithm version. ``DEFAULT`` is the library's current version (0x13)."""

    V10 = 0x10
    V13 = 0x13
    DEFAULT = 0x13

    @classmethod
    def parse(cls, value: Version | int | str) -> Version:
        """Accept a member, its int value, or a name such as ``"V13"`` / ``"13"`` / ``"19"``."""
        if isinstance(value, str):
            text = value.strip().upper()
            if text in cls.__members__:
                return cls[text]
            if text.isdigit():
                # "10"/"13" are the hex-looking names, "16"/"19" the decimal values
                return cls(int(text, 16) if text in ("10", "13") else int(text))
            raise ValueError(f"Unknown Argon2 version: '{value}'")
        return cls(value)


@dataclass(frozen=True, slots=True)
class Argon2Config:
    """Argon2 parameters bound to a hasher for its whole lifetime.

    Cost values are not validated here: the primitive rejects invalid ones
    when a hash is computed or verified.
    """

    iterations: int = 8
    memory_kb: int = 1 << 16  # 64 MiB
    parallelism: int = 8
    hash_length: int = 64
    salt_length: int = 64
    variant: Variant = Variant.ID
    version: Version = Version.V13

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Argon2Config:
        """Build a config from plain settings, e.g. ``{"memory_kb": 19456, "variant": "id"}``.

        Keys are applied as options in mapping order. Unknown keys raise ValueError.
        """
        options = []
        for key, value in mapping.items():
            factory = _OPTION_FACTORIES.get(key)
            if factory is None:
                raise ValueError(
                    f"Unknown Argon2 setting: '{key}'. "
                    f"Valid settings: {', '.join(sorted(_OPTION_FACTORIES))}"
                )
            options.append(factory(value))
        return apply_options(default_config(), options)


Option = Callable[[Argon2Config], Argon2Config]


def default_config() -> Argon2Config:
    """Return the default parameter set (t=8, m=64 MiB, p=8, 64-byte hash and salt, argon2id v13)."""
    return Argon2Config()


def apply_options(config: Argon2Config, options: Iterable[Option]) -> Argon2Config:
    """Apply options in order. A later option overrides an earlier one on the same field."""
    for option in options:
        config = option(config)
    return config


def iterations(value: int) -> Option:
    """Set the time cost."""
    return lambda config: dataclasses.replace(config, iterations=value)


def memory_kb(value: int) -> Option:
    """Set the memory cost in kilobytes."""
    return lambda config: dataclasses.replace(config, memory_kb=value)


def parallelism(value: int) -> Option:
    """Set the number of lanes."""
    return lambda config: dataclasses.replace(config, parallelism=value)


def hash_length(value: int) -> Option:
    """Set the raw output length in bytes."""
    return lambda config: dataclasses.replace(config, hash_length=value)


def salt_length(value: int) -> Option:
    """Set the salt length in bytes."""
    return lambda config: dataclasses.replace(config, salt_length=value)


def variant(value: Variant | int | str) -> Option:
    """Set the algorithm family used for new hashes."""
    parsed = Variant.parse(value)
    return lambda config: dataclasses.replace(config, variant=parsed)


def version(value: Version | int | str) -> Option:
    """Set the algorithm version used for new hashes."""
    parsed = Version.parse(value)
    return lambda config: dataclasses.replace(config, version=parsed)


_OPTION_FACTORIES: dict[str, Callable[[Any], Option]] = {
    "iterations": iterations,
    "memory_kb": memory_kb,
    "parallelism": parallelism,
    "hash_length": hash_length,
    "salt_length": salt_length,
    "variant": variant,
    "version": version,
}
