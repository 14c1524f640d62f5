"""Schema compiler: schema string to per-flag marshallers."""

from typing import Dict, List

from .config import FlagDefinition, FlagType
from .errors import ArgsError, ErrorCode, Outcome
from .marshallers import Marshaller


class SchemaCompiler:
    """Compiles a schema string such as ``"l, p#, d*, v##"``.

    Each comma separated element is a flag letter followed by an optional
    type suffix: none for boolean, ``*`` for string, ``#`` for integer and
    ``##`` for double. A flag declared twice keeps its last type.
    """

    def __init__(self, schema: str):
        self.schema = schema

    def compile(self) -> Outcome:
        """Compile the schema into a ``{flag: Marshaller}`` mapping."""
        marshallers: Dict[str, Marshaller] = {}
        for element in self._elements():
            outcome = self._parse_element(element)
            if not outcome.ok:
                return outcome
            definition = outcome.value
            marshallers[definition.flag] = Marshaller(definition.flag_type)
        return Outcome(marshallers)

    def _elements(self) -> List[str]:
        elements = []
        for element in self.schema.split(','):
            element = element.strip()
            if element:
                elements.append(element)
        return elements

    def _parse_element(self, element: str) -> Outcome:
        flag, suffix = element[0], element[1:]
        if not flag.isalpha():
            return Outcome.failure(ArgsError(flag, self.schema, ErrorCode.INVALID_ARGUMENT_NAME))
        try:
            flag_type = FlagType(suffix)
        except ValueError:
            return Outcome.failure(ArgsError(flag, suffix, ErrorCode.INVALID_FORMAT))
        return Outcome(FlagDefinition(flag, flag_type))
