"""Error taxonomy for schema compilation and argument scanning."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


# Flag slot of errors that are not about a single flag
NO_FLAG = "\0"


class ErrorCode(Enum):
    """Kinds of parse failure"""
    # Raised while compiling the schema
    INVALID_ARGUMENT_NAME = "invalid_argument_name"
    INVALID_FORMAT = "invalid_format"
    # Raised while scanning tokens
    UNEXPECTED_ARGUMENT = "unexpected_argument"
    MISSING_STRING = "missing_string"
    MISSING_INTEGER = "missing_integer"
    INVALID_INTEGER = "invalid_integer"
    MISSING_DOUBLE = "missing_double"
    INVALID_DOUBLE = "invalid_double"


_MESSAGES = {
    ErrorCode.UNEXPECTED_ARGUMENT: "Argument(s) -{parameter} unexpected.",
    ErrorCode.INVALID_ARGUMENT_NAME: "Bad character: '{flag}' in Args format: '{parameter}'.",
    ErrorCode.INVALID_FORMAT: "Argument: '{flag}' has invalid format: '{parameter}'.",
    ErrorCode.MISSING_STRING: "Could not find string parameter for -{flag}.",
    ErrorCode.INVALID_INTEGER: "Argument -{flag} expects an integer but was '{parameter}'.",
    ErrorCode.MISSING_INTEGER: "Could not find integer parameter for -{flag}.",
    ErrorCode.INVALID_DOUBLE: "Argument -{flag} expects a double but was '{parameter}'.",
    ErrorCode.MISSING_DOUBLE: "Could not find double parameter for -{flag}.",
}


class ArgsError(ValueError):
    """Raised when a schema or an argument list cannot be parsed.

    Carries the flag that triggered the failure (``NO_FLAG`` when the failure
    is not about a single flag), the offending parameter text and the error
    code. Unless an explicit message is given, the message is rendered from a
    fixed template per error code.
    """

    def __init__(self, flag: str, parameter: Optional[str], code: ErrorCode,
                 message: Optional[str] = None):
        self.flag = flag
        self.parameter = parameter
        self.code = code
        if message is None:
            message = self.render(flag, parameter, code)
        super().__init__(message)

    @property
    def message(self) -> str:
        return self.args[0]

    @staticmethod
    def render(flag: str, parameter: Optional[str], code: ErrorCode) -> str:
        """Render the canned message for an error code."""
        template = _MESSAGES.get(code)
        if template is None:
            return "An error occurred, but no matching error message was found."
        return template.format(flag=flag, parameter=parameter)

    def for_flag(self, flag: str) -> 'ArgsError':
        """Return a copy of this error attributed to ``flag``."""
        return ArgsError(flag, self.parameter, self.code)

    def __repr__(self) -> str:
        return f"ArgsError({self.flag!r}, {self.parameter!r}, {self.code})"


@dataclass
class Outcome:
    """Result of a compile or scan stage: a value or an error, never both."""
    value: Any = None
    error: Optional[ArgsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, raising the stored error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def failure(cls, error: ArgsError) -> 'Outcome':
        return cls(error=error)
