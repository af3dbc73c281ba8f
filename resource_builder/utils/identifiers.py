from __future__ import annotations

import itertools
import random
import string
import threading
from typing import Optional, Set

ALPHABET = string.digits + string.ascii_lowercase


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return ALPHABET[0]
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(ALPHABET[rem])
    return "".join(reversed(digits))


class IdentifierGenerator:
    """
    Issues short tokens used to rename copied resources.

    Each token is a base-36 sequence number followed by random characters,
    cut to the requested length. Tokens are checked against everything this
    generator has issued, so two calls never return the same token.
    """

    def __init__(
        self,
        length: int = 8,
        max_attempts: int = 64,
        rng: Optional[random.Random] = None,
    ):
        if length < 1:
            raise ValueError("identifier length must be at least 1")
        self.length = length
        self.max_attempts = max_attempts
        self._rng = rng or random.SystemRandom()
        self._counter = itertools.count()
        self._issued: Set[str] = set()
        self._lock = threading.Lock()

    @property
    def issued_count(self) -> int:
        return len(self._issued)

    def generate(self, length: Optional[int] = None) -> str:
        length = self.length if length is None else length
        if length < 1:
            raise ValueError("identifier length must be at least 1")

        with self._lock:
            for _ in range(self.max_attempts):
                token = self._compose(next(self._counter), length)
                if token not in self._issued:
                    self._issued.add(token)
                    return token

        raise RuntimeError(
            f"could not produce a unique identifier of length {length} "
            f"after {self.max_attempts} attempts"
        )

    def _compose(self, sequence: int, length: int) -> str:
        suffix = "".join(self._rng.choice(ALPHABET) for _ in range(length))
        return (to_base36(sequence) + suffix)[:length]
