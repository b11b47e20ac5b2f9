"""
  Lisp Reader: tokenizer and recursive-descent parser

- Tokens are produced by padding parentheses with spaces and splitting on
  whitespace. There are no strings, comments or quote characters, so a '('
  or ')' can never be part of an atom.
- Emits Python primitives:

    - lists -> Python list ([] is the empty list)
    - integers -> int (signed 64-bit)
    - floats -> float
    - true / false -> bool
    - anything else -> Symbol

- Only the first complete form is read by `parse`; trailing tokens are ignored.
"""

from __future__ import annotations

import math
import re
from typing import Iterable, Optional

from lis import SExpression
from lis.errors import LisUnexpectedEOF, LisUnexpectedCloseParen
from lis.types.symbol import Symbol

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

INTEGER_RE = re.compile(r"[+-]?[0-9]+")
INFINITY_SPELLINGS = ("inf", "infinity")


def tokenize(source: str) -> list[str]:
    """Split `source` into a flat list of tokens."""
    return source.replace("(", " ( ").replace(")", " ) ").split()


def _parse_int(token: str) -> Optional[int]:
    if "." in token or not INTEGER_RE.fullmatch(token):
        return None
    value = int(token)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def _parse_float(token: str) -> Optional[float]:
    # float() also takes underscores and non-ASCII digits; plain literals only
    if not token.isascii() or "_" in token:
        return None
    unsigned = token[1:] if token[:1] in ("+", "-") else token
    # nan takes no sign
    if unsigned.lower() == "nan" and unsigned != token:
        return None
    if unsigned[:2].lower() == "0x":
        # hex mantissa needs a binary exponent: 0x1p3, -0x1.8p1
        if "p" not in unsigned.lower():
            return None
        try:
            return float.fromhex(token)
        except (ValueError, OverflowError):
            return None
    try:
        value = float(token)
    except ValueError:
        return None
    # 1e400 overflows rather than naming infinity
    if math.isinf(value) and unsigned.lower() not in INFINITY_SPELLINGS:
        return None
    return value


def atom(token: str) -> SExpression:
    """Classify a single non-paren token: int, then float, then bool, then symbol."""
    int_val = _parse_int(token)
    if int_val is not None:
        return int_val
    float_val = _parse_float(token)
    if float_val is not None:
        return float_val
    if token == "true" or token == "false":
        return token == "true"
    return Symbol(token)


class TokenStream:
    """A cursor over a token list shared by the recursive reader."""

    def __init__(self, tokens: Iterable[str]):
        self.tokens: list[str] = list(tokens)
        self.idx = 0

    def empty(self) -> bool:
        return self.idx >= len(self.tokens)

    def peek(self) -> Optional[str]:
        if self.empty():
            return None
        return self.tokens[self.idx]

    def advance(self) -> str:
        if self.empty():
            raise LisUnexpectedEOF("unexpected EOF while reading")
        self.idx += 1
        return self.tokens[self.idx - 1]

    def parse_expr(self) -> SExpression:
        """Read one expression from the front of the stream."""
        token = self.advance()

        if token == "(":
            items: list[SExpression] = []
            while self.peek() != ")":
                # parse_expr raises LisUnexpectedEOF once the stream runs dry
                items.append(self.parse_expr())
            self.advance()  # drop ')'
            return items

        if token == ")":
            raise LisUnexpectedCloseParen("unexpected )")

        return atom(token)


def read(tokens: TokenStream) -> SExpression:
    return tokens.parse_expr()


def parse(source: str) -> SExpression:
    """Read the first form in `source`."""
    return read(TokenStream(tokenize(source)))
