"""Path-data tokenizer: raw ``d`` string -> ordered list of Tokens.

Single left-to-right scan. State is an accumulator for the number being
read plus the token currently being filled. Glued numbers such as
``10-5`` and ``1.5.25`` are split at the sign / second decimal point;
exponents (``1e-5``) keep their sign.

Never raises. Substrings with no leading number are dropped.
"""

from __future__ import annotations

import logging
import math
import re

from pathnorm.svg.commands import COMMAND_LETTERS, Token

logger = logging.getLogger(__name__)

_SEPARATORS = frozenset(" ,\t\n\r\f")

# Longest leading decimal number, the way parseFloat() reads a prefix.
_NUMBER_PREFIX_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def _to_number(text: str) -> float | None:
    match = _NUMBER_PREFIX_RE.match(text)
    if match is None:
        return None
    value = float(match.group(0))
    # 1e999 and the like overflow to inf
    if not math.isfinite(value):
        return None
    return value


def tokenize(path_data: str) -> list[Token]:
    """Split path data into (command letter, numbers) tokens."""
    tokens: list[Token] = []
    if not path_data:
        return tokens

    kind: str | None = None
    params: list[float] = []
    accumulator = ""

    def flush() -> None:
        nonlocal accumulator
        if not accumulator:
            return
        value = _to_number(accumulator)
        if value is None:
            logger.debug("Dropping malformed number %r", accumulator)
        elif kind is None:
            logger.debug("Dropping number %r before first command", accumulator)
        else:
            params.append(value)
        accumulator = ""

    def close_token() -> None:
        if kind is not None:
            tokens.append(Token(kind, tuple(params)))

    for char in path_data:
        if char in _SEPARATORS:
            flush()
        elif char in COMMAND_LETTERS:
            flush()
            close_token()
            kind = char
            params = []
        elif char == "-" and accumulator and accumulator[-1] not in "eE":
            flush()
            accumulator = "-"
        elif char == "." and "." in accumulator:
            flush()
            accumulator = "."
        else:
            accumulator += char

    flush()
    close_token()
    return tokens
