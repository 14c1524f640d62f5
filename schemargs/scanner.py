"""Token scanner: walks the command line and feeds flags to marshallers."""

from typing import Dict, List, Set

from .errors import ArgsError, ErrorCode, NO_FLAG, Outcome
from .marshallers import Marshaller


FLAG_PREFIX = '-'


class ArgumentScanner:
    """Scans a token list against compiled marshallers.

    Value errors stop the scan at once. Unknown flags are collected and
    reported together once every token has been scanned.
    """

    def __init__(self, marshallers: Dict[str, Marshaller]):
        self.marshallers = marshallers
        self.found: Set[str] = set()
        self.unexpected: Set[str] = set()

    def scan(self, tokens: List[str]) -> Outcome:
        """Scan ``tokens`` and return the set of flags found."""
        self.found = set()
        self.unexpected = set()
        cursor = 0
        while cursor < len(tokens):
            token = tokens[cursor]
            cursor += 1
            # Bare words pass through untouched
            if not token.startswith(FLAG_PREFIX):
                continue
            for flag in token[len(FLAG_PREFIX):]:
                marshaller = self.marshallers.get(flag)
                if marshaller is None:
                    self.unexpected.add(flag)
                    continue
                result = marshaller.consume(tokens, cursor)
                if not result.ok:
                    return Outcome.failure(result.error.for_flag(flag))
                cursor = result.cursor
                self.found.add(flag)

        if self.unexpected:
            return Outcome.failure(
                ArgsError(NO_FLAG, self.unexpected_flags(), ErrorCode.UNEXPECTED_ARGUMENT)
            )
        return Outcome(set(self.found))

    def unexpected_flags(self) -> str:
        """Unknown flags seen so far, sorted and concatenated."""
        return ''.join(sorted(self.unexpected))
