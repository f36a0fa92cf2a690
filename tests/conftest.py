"""Test fixtures for argonhash."""

import pytest

from argonhash import (
    Argon2Hasher,
    Status,
    create_hasher,
    hash_length,
    iterations,
    memory_kb,
    parallelism,
    salt_length,
)

CORRECT_PASSPHRASE = "TrueSecretPassPhrase"
INCORRECT_PASSPHRASE = "BadPassPhrase"

BAD_MEMORY_ENCODING = (
    "$argon2id$v=19$m=0,t=16,p=8$MUh1TFVfaXZiNmFnU1BmZHpKYjE3V1BSU3hKT0Z5TzNzVlJSbUZvTXJQS2k2QktRWWRZOFJE"
    "c3daNXlCXzhfWnpESlNBeW0zcmZYQWo2WGxKTW51cUE9PQ$t2HezttHhC/RqkDRG9S9OMXjkUbmGORqzzviDXIw8lA"
)
BAD_VARIANT_ENCODING = (
    "$argon2k$v=19$m=65536,t=5,p=8$elFNSmhRa2JYdUY4cGc2NXZqUUdoUGJmc1M1VFkxSjh4aWU4cT"
    "A0elh5d2k5TVRfN1hqSEVqSDRKT0gteG5OUHkzOEw2OG5zZWdhNFJ6UDVQSTJhc1E9PQ$lo2264d+4pS9yPvTXOZE/sdqc"
    "Gz6fFb0o5hqTz1F/2c"
)


def cheap_options() -> list:
    """Smallest parameters the reference library accepts, for fast tests."""
    return [
        iterations(1),
        memory_kb(64),
        parallelism(1),
        hash_length(16),
        salt_length(16),
    ]


class FailingRandomSource:
    """Random source that always fails, like an unavailable OS entropy pool."""

    def __init__(self) -> None:
        self.error = OSError("failed")

    def read(self, size: int) -> bytes:
        raise self.error


class FixedRandomSource:
    """Random source returning the same bytes every time."""

    def read(self, size: int) -> bytes:
        return b"\x01" * size


class FakePrimitive:
    """Scripted primitive that records calls and returns preset statuses."""

    def __init__(
        self,
        *,
        derive_status: int = Status.OK,
        derive_output: bytes = b"$argon2id$fake\x00\x00\x00",
        verify_status: int = Status.OK,
    ) -> None:
        self.derive_status = derive_status
        self.derive_output = derive_output
        self.verify_status = verify_status
        self.derive_calls: list[tuple] = []
        self.verify_calls: list[tuple] = []

    def encoded_length(self, iterations, memory_kb, parallelism, salt_length, hash_length, variant):
        return len(self.derive_output)

    def derive(
        self, iterations, memory_kb, parallelism, secret, salt,
        hash_length, encoded_length, variant, version,
    ):
        self.derive_calls.append(
            (iterations, memory_kb, parallelism, secret, salt,
             hash_length, encoded_length, variant, version)
        )
        return self.derive_status, self.derive_output

    def verify(self, encoded_hash, secret, variant):
        self.verify_calls.append((encoded_hash, secret, variant))
        return self.verify_status

    def status_message(self, status):
        return f"fake status {status}"


@pytest.fixture
def hasher() -> Argon2Hasher:
    """A real Argon2 hasher with cheap cost parameters."""
    return create_hasher(*cheap_options())


@pytest.fixture
def fake_primitive() -> FakePrimitive:
    return FakePrimitive()
