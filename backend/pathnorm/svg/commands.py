"""Path command types shared by the tokenizer, normalizer and formatter.

Leaf module. No engine imports.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

COMMAND_LETTERS = "MmLlHhVvCcSsQqTtAaZz"

# Parameters per logical operation, keyed by uppercase letter.
ARITY: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}

CANONICAL_KINDS = frozenset({"M", "L", "C", "Q", "Z"})


@dataclass(frozen=True)
class Token:
    """One command letter as written in the source, with all its numbers.

    A token may carry several parameter groups (implicit repetition).
    """

    kind: str
    params: tuple[float, ...] = ()

    @property
    def is_relative(self) -> bool:
        return self.kind.islower()

    @property
    def absolute_kind(self) -> str:
        return self.kind.upper()

    @property
    def arity(self) -> int:
        return ARITY[self.absolute_kind]

    def groups(self) -> Iterator[tuple[float, ...]]:
        """Yield each complete parameter group; a short trailing group is dropped."""
        n = self.arity
        if n == 0:
            yield ()
            return
        for i in range(0, len(self.params) - n + 1, n):
            yield self.params[i : i + n]


@dataclass(frozen=True)
class CanonicalCommand:
    """Absolute M, L, C, Q or Z with exactly its arity's worth of numbers."""

    kind: str
    params: tuple[float, ...] = ()

    @property
    def end_point(self) -> tuple[float, float] | None:
        if len(self.params) < 2:
            return None
        return (self.params[-2], self.params[-1])
