"""Vulture whitelist: public API that consumers call but the package never does."""

# ---------------------------------------------------------------------------
# Public options and config helpers (used by consumers, not internally)
# ---------------------------------------------------------------------------
from argonhash.config import Argon2Config, Variant, Version

Argon2Config.from_mapping
Variant.D
Version.V10
Version.DEFAULT

# ---------------------------------------------------------------------------
# Primitive status codes (named for callers inspecting PrimitiveError.status)
# ---------------------------------------------------------------------------
from argonhash.core.primitive import Status

Status.OUTPUT_PTR_NULL
Status.MEMORY_TOO_LITTLE
Status.MEMORY_ALLOCATION_ERROR
Status.DECODING_FAIL

# ---------------------------------------------------------------------------
# Protocol method parameters (required by signature)
# ---------------------------------------------------------------------------
_.encoded_hash
_.salt_length
