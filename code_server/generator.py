"""Random one-time code generation."""

from __future__ import annotations

import secrets
import string

from .models import Code

# 28 symbols: ASCII punctuation without the quote and escape characters.
SYMBOLS = "".join(ch for ch in string.punctuation if ch not in "\"'`\\")
ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + SYMBOLS
CODE_LENGTH = 15


class RandomSourceError(RuntimeError):
    pass


def _random_bytes(length: int) -> bytes:
    try:
        return secrets.token_bytes(length)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError("Secure random source is unavailable") from exc


def generate() -> Code:
    """Return a new code drawn from the OS CSPRNG.

    Each byte is mapped with ``byte % len(ALPHABET)``, so the first 76
    characters of the alphabet are slightly more likely than the rest.
    """
    raw = _random_bytes(CODE_LENGTH)
    value = "".join(ALPHABET[b % len(ALPHABET)] for b in raw)
    return Code(value)
