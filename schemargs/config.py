"""Configuration and data classes for schemargs."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Any


class FlagType(Enum):
    """Value types a flag can declare, keyed by their schema suffix"""
    BOOLEAN = ""
    STRING = "*"
    INTEGER = "#"
    DOUBLE = "##"

    @property
    def default(self) -> Any:
        """Neutral value held before the flag is seen on the command line."""
        return _DEFAULTS[self]

    @property
    def label(self) -> str:
        return self.name.lower()


_DEFAULTS = {
    FlagType.BOOLEAN: False,
    FlagType.STRING: "",
    FlagType.INTEGER: 0,
    FlagType.DOUBLE: 0.0,
}


class OutputFormat(Enum):
    """Output format options"""
    TEXT = "text"
    JSON = "json"


@dataclass
class FlagDefinition:
    """A single declared flag"""
    flag: str
    flag_type: FlagType


@dataclass
class CliConfig:
    """Configuration for a command line run"""
    schema: str = ""
    tokens: List[str] = field(default_factory=list)
    output_format: OutputFormat = OutputFormat.TEXT
    program: Optional[str] = None
    verbose: bool = False
