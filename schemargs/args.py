"""Parsed command line arguments."""

from typing import Dict, List, Optional, Sequence, Set

from .compiler import SchemaCompiler
from .config import FlagDefinition, FlagType
from .marshallers import Marshaller
from .scanner import ArgumentScanner


class Args:
    """Parses single letter command line flags against a schema.

    Usage:
        args = Args("l, p#, d*, v##", ["-l", "-p", "3002", "-d", "/var/tmp"])
        args.get_boolean('l')   # True
        args.get_int('p')       # 3002

    The schema declares ``l`` (boolean), ``p`` (integer), ``d`` (string) and
    ``v`` (double). Parsing happens once, in the constructor, which raises
    ``ArgsError`` on a bad schema or bad tokens. Accessors never raise: an
    undeclared flag or a type mismatch yields the type's neutral value.
    """

    def __init__(self, schema: str, tokens: Sequence[str]):
        self._schema = schema
        self._tokens = list(tokens)
        self._marshallers: Dict[str, Marshaller] = SchemaCompiler(schema).compile().unwrap()
        self._found: Set[str] = ArgumentScanner(self._marshallers).scan(self._tokens).unwrap()

    @property
    def schema(self) -> str:
        return self._schema

    def usage(self) -> str:
        return format_usage(self._schema)

    def has(self, flag: str) -> bool:
        """Return True if ``flag`` is declared in the schema."""
        return flag in self._marshallers

    def supplied(self, flag: str) -> bool:
        """Return True if ``flag`` appeared on the command line."""
        return flag in self._found

    def definitions(self) -> List[FlagDefinition]:
        return [FlagDefinition(flag, m.kind) for flag, m in self._marshallers.items()]

    def get_boolean(self, flag: str) -> bool:
        return self._value(flag, FlagType.BOOLEAN)

    def get_string(self, flag: str) -> str:
        return self._value(flag, FlagType.STRING)

    def get_int(self, flag: str) -> int:
        return self._value(flag, FlagType.INTEGER)

    def get_double(self, flag: str) -> float:
        return self._value(flag, FlagType.DOUBLE)

    def _value(self, flag: str, kind: FlagType):
        marshaller: Optional[Marshaller] = self._marshallers.get(flag)
        if marshaller is None or marshaller.kind is not kind:
            return kind.default
        return marshaller.value

    def __repr__(self) -> str:
        return f"Args({self._schema!r}, {self._tokens!r})"


def format_usage(schema: str) -> str:
    """Render a schema as a usage hint, ``-[<schema>]``, or "" if it is empty."""
    if schema:
        return f"-[{schema}]"
    return ""
