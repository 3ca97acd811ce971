"""Short random identifiers for epics and stories."""

from __future__ import annotations

import secrets
import string
from typing import Callable

ALPHABET = string.ascii_letters + string.digits + "_-"
DEFAULT_ID_LENGTH = 6

IdGenerator = Callable[[], str]


def generate_id(length: int = DEFAULT_ID_LENGTH) -> str:
    """Return a random code such as ``'V1StGX'``."""
    if length < 1:
        raise ValueError("id length must be positive")
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


def id_generator(length: int = DEFAULT_ID_LENGTH) -> IdGenerator:
    """Build a zero-argument generator producing ids of ``length`` characters."""
    if length < 1:
        raise ValueError("id length must be positive")
    return lambda: generate_id(length)
