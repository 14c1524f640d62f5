"""
schemargs - Schema-driven command line argument parser

Decodes single letter command line flags into typed values, driven by a
compact schema string such as ``"l, p#, d*, v##"``.
"""

from .config import (
    CliConfig,
    FlagDefinition,
    FlagType,
    OutputFormat,
)
from .errors import ArgsError, ErrorCode, NO_FLAG, Outcome
from .marshallers import Marshaller, ConsumeResult
from .compiler import SchemaCompiler
from .scanner import ArgumentScanner
from .args import Args, format_usage
from .schema import SchemaFileValidator


__version__ = '1.0.0'

__all__ = [
    # Main entry point
    'Args',
    'format_usage',

    # Errors
    'ArgsError',
    'ErrorCode',
    'NO_FLAG',
    'Outcome',

    # Data classes
    'CliConfig',
    'FlagDefinition',
    'FlagType',
    'OutputFormat',

    # Components
    'Marshaller',
    'ConsumeResult',
    'SchemaCompiler',
    'ArgumentScanner',
    'SchemaFileValidator',
]
