import pytest

from schemargs.compiler import SchemaCompiler
from schemargs.config import FlagType
from schemargs.errors import ErrorCode


def compile_kinds(schema: str) -> dict:
    marshallers = SchemaCompiler(schema).compile().unwrap()
    return {flag: m.kind for flag, m in marshallers.items()}


def test_empty_schema() -> None:
    assert compile_kinds("") == {}


def test_all_types() -> None:
    assert compile_kinds("l, p#, d*, v##") == {
        'l': FlagType.BOOLEAN,
        'p': FlagType.INTEGER,
        'd': FlagType.STRING,
        'v': FlagType.DOUBLE,
    }


@pytest.mark.parametrize("schema", ["a,b", "a, b", "  a ,\tb  ", "a,,b", "a, b, "])
def test_whitespace_and_empty_elements(schema: str) -> None:
    assert compile_kinds(schema) == {'a': FlagType.BOOLEAN, 'b': FlagType.BOOLEAN}


def test_redeclared_flag_last_wins() -> None:
    kinds = compile_kinds("a, b*, a#")
    assert kinds == {'a': FlagType.INTEGER, 'b': FlagType.STRING}
    assert list(kinds) == ['a', 'b']


def test_unicode_letters_are_valid_names() -> None:
    assert compile_kinds("é*") == {'é': FlagType.STRING}


@pytest.mark.parametrize("schema, flag", [("*", '*'), ("a, 3#", '3'), ("b, -d", '-')])
def test_invalid_argument_name(schema: str, flag: str) -> None:
    outcome = SchemaCompiler(schema).compile()
    assert not outcome.ok
    assert outcome.error.code is ErrorCode.INVALID_ARGUMENT_NAME
    assert outcome.error.flag == flag
    assert outcome.error.parameter == schema


@pytest.mark.parametrize(
    "schema, flag, suffix",
    [("f┼", 'f', "┼"), ("a, b###", 'b', "###"), ("x*#", 'x', "*#"), ("q #", 'q', " #")],
)
def test_invalid_format(schema: str, flag: str, suffix: str) -> None:
    outcome = SchemaCompiler(schema).compile()
    assert outcome.error.code is ErrorCode.INVALID_FORMAT
    assert outcome.error.flag == flag
    assert outcome.error.parameter == suffix


def test_first_error_wins() -> None:
    outcome = SchemaCompiler("a~, 9").compile()
    assert outcome.error.code is ErrorCode.INVALID_FORMAT
    assert outcome.value is None
