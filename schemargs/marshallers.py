"""Per-flag value decoders."""

import re
from dataclasses import dataclass, field
from typing import Any, List, Optional

from .config import FlagType
from .errors import ArgsError, ErrorCode, NO_FLAG


INT_PATTERN = re.compile(r'[+-]?[0-9]+')
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1
DOUBLE_PATTERN = re.compile(
    r'[+-]?(NaN|Infinity|([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?[fFdD]?)'
)
# Stripped from both ends of a double before matching
CONTROL_AND_SPACE = ''.join(chr(i) for i in range(0x21))


@dataclass
class ConsumeResult:
    """Cursor position after a marshaller ran, plus any value error"""
    cursor: int
    error: Optional[ArgsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class Marshaller:
    """Decoder and value holder for one declared flag.

    ``consume`` reads zero or one token starting at ``cursor`` and reports the
    cursor position after it. Errors carry ``NO_FLAG``; the scanner attributes
    them to the flag being processed.
    """
    kind: FlagType
    value: Any = field(default=None)

    def __post_init__(self):
        if self.value is None:
            self.value = self.kind.default

    def consume(self, tokens: List[str], cursor: int) -> ConsumeResult:
        """Consume the value for this flag, if its type takes one."""
        consumers = {
            FlagType.BOOLEAN: self._consume_boolean,
            FlagType.STRING: self._consume_string,
            FlagType.INTEGER: self._consume_integer,
            FlagType.DOUBLE: self._consume_double,
        }
        return consumers[self.kind](tokens, cursor)

    def _consume_boolean(self, tokens: List[str], cursor: int) -> ConsumeResult:
        self.value = True
        return ConsumeResult(cursor)

    def _consume_string(self, tokens: List[str], cursor: int) -> ConsumeResult:
        if cursor >= len(tokens):
            return ConsumeResult(cursor, ArgsError(NO_FLAG, None, ErrorCode.MISSING_STRING))
        self.value = tokens[cursor]
        return ConsumeResult(cursor + 1)

    def _consume_integer(self, tokens: List[str], cursor: int) -> ConsumeResult:
        if cursor >= len(tokens):
            return ConsumeResult(cursor, ArgsError(NO_FLAG, None, ErrorCode.MISSING_INTEGER))
        parameter = tokens[cursor]
        number = parse_int(parameter)
        if number is None:
            return ConsumeResult(cursor + 1,
                                 ArgsError(NO_FLAG, parameter, ErrorCode.INVALID_INTEGER))
        self.value = number
        return ConsumeResult(cursor + 1)

    def _consume_double(self, tokens: List[str], cursor: int) -> ConsumeResult:
        if cursor >= len(tokens):
            return ConsumeResult(cursor, ArgsError(NO_FLAG, None, ErrorCode.MISSING_DOUBLE))
        parameter = tokens[cursor]
        number = parse_double(parameter)
        if number is None:
            return ConsumeResult(cursor + 1,
                                 ArgsError(NO_FLAG, parameter, ErrorCode.INVALID_DOUBLE))
        self.value = number
        return ConsumeResult(cursor + 1)


def parse_int(text: str) -> Optional[int]:
    """Parse a signed 32-bit decimal integer, or return None."""
    if not INT_PATTERN.fullmatch(text):
        return None
    number = int(text)
    if not INT_MIN <= number <= INT_MAX:
        return None
    return number


def parse_double(text: str) -> Optional[float]:
    """Parse a decimal double such as ``-3.67``, ``1e3``, ``2.5f`` or ``Infinity``, or return None."""
    text = text.strip(CONTROL_AND_SPACE)
    if not DOUBLE_PATTERN.fullmatch(text):
        return None
    return float(text.rstrip('fFdD'))
