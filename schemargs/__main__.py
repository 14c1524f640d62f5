"""CLI entry point for schemargs."""

import sys
import json
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from .args import Args, format_usage
from .config import CliConfig, FlagType, OutputFormat
from .errors import ArgsError
from .schema import SchemaFileValidator


DEFAULT_PROGRAM = 'program'


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog='schemargs',
        description='Decode single letter command line flags against a schema',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Decode a boolean, an integer and a string flag
  python -m schemargs -S "b, d#, s*" -- -b -d 3 -s hello

  # Same, reading the schema from a JSON schema file
  python -m schemargs -s flags.json -- -bd 3

  # Machine readable output
  python -m schemargs -S "x##" -f json -- -x -3.67
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('-S', '--schema', default=None,
                        help='Schema string, e.g. "l, p#, d*, v##"')
    source.add_argument('-s', '--schema-file', type=Path, default=None,
                        help='Path to JSON file holding the schema')
    parser.add_argument('tokens', nargs='*',
                        help='Command line tokens to decode (put them after --)')
    parser.add_argument('-f', '--format', choices=['text', 'json'],
                        default='text', help='Output format (default: text)')
    parser.add_argument('-p', '--program', default=None,
                        help='Program name shown in usage messages')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Suppress progress output')

    args = parser.parse_args(argv)

    if args.schema_file is not None and not args.schema_file.is_file():
        print(f"ERROR: Schema file not found: {args.schema_file}")
        sys.exit(1)

    verbose = not args.quiet and sys.stdout.isatty()

    cli_config = CliConfig(
        schema=args.schema,
        tokens=args.tokens,
        output_format=OutputFormat(args.format),
        program=args.program,
        verbose=verbose,
    )

    try:
        if args.schema_file is not None:
            _log(verbose, f"[1/3] Loading schema file {args.schema_file}...")
            document = SchemaFileValidator().validate(args.schema_file)
            cli_config.schema = document['schema']
            if cli_config.program is None:
                cli_config.program = document.get('program')
        else:
            _log(verbose, "[1/3] Using schema from command line...")
        sys.exit(run(cli_config))
    except ValueError as e:
        print(f"\n✗ ERROR: {e}")
        sys.exit(1)


def run(config: CliConfig) -> int:
    """Decode the configured tokens and print the result. Returns the exit code."""
    program = config.program or DEFAULT_PROGRAM
    _log(config.verbose, f"      Schema: {config.schema!r}")
    _log(config.verbose, f"[2/3] Compiling and scanning {len(config.tokens)} tokens...")
    try:
        parsed = Args(config.schema, config.tokens)
    except ArgsError as e:
        print(f"✗ ERROR: {e}")
        print(f"Usage: {program} {format_usage(config.schema)}".rstrip())
        return 2

    _log(config.verbose, "[3/3] Rendering...")
    if config.output_format == OutputFormat.JSON:
        print(json.dumps(to_dict(parsed), indent=2))
    else:
        for line in format_text(parsed):
            print(line)
    return 0


def to_dict(parsed: Args) -> Dict[str, Any]:
    """Render decoded flags as a JSON-serializable dict."""
    flags = {}
    for definition in parsed.definitions():
        flags[definition.flag] = {
            'type': definition.flag_type.label,
            'value': _value(parsed, definition.flag, definition.flag_type),
            'supplied': parsed.supplied(definition.flag),
        }
    return {'usage': parsed.usage(), 'flags': flags}


def format_text(parsed: Args) -> List[str]:
    """Render decoded flags one per line."""
    lines = []
    for definition in parsed.definitions():
        value = _value(parsed, definition.flag, definition.flag_type)
        line = f"-{definition.flag}  {definition.flag_type.label}  {value!r}"
        if parsed.supplied(definition.flag):
            line += "  (supplied)"
        lines.append(line)
    return lines


def _value(parsed: Args, flag: str, flag_type: FlagType) -> Any:
    getters = {
        FlagType.BOOLEAN: parsed.get_boolean,
        FlagType.STRING: parsed.get_string,
        FlagType.INTEGER: parsed.get_int,
        FlagType.DOUBLE: parsed.get_double,
    }
    return getters[flag_type](flag)


def _log(verbose: bool, message: str) -> None:
    """Log message if verbose mode is enabled."""
    if verbose:
        print(message)


if __name__ == '__main__':
    main()
