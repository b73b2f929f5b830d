#!/usr/bin/env python3
"""
pwgen CLI
=========
Command-line interface for password generation and checking.

Usage:
    pwgen generate 88 qwerty
    pwgen generate 64 NCName master https://site.io/ 1000
    pwgen list
    pwgen check 'aB3' -g NCName
"""

import argparse
import logging
import sys

from pwgen import __version__
from pwgen.settings import get_defaults

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def result(self, text: str):
        """Always printed; this is what scripts capture."""
        print(text)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, headers: list, rows: list):
        """Print a formatted table."""
        if self.quiet:
            return

        col_widths = [max(len(str(h)), max((len(str(r[i])) for r in rows), default=0)) + 2
                      for i, h in enumerate(headers)]

        header_line = ''.join(str(h).ljust(w) for h, w in zip(headers, col_widths))
        print(header_line)
        print('-' * len(header_line))

        for row in rows:
            print(''.join(str(c).ljust(w) for c, w in zip(row, col_widths)))


def positive_int(value: str) -> int:
    """argparse type for counts that must be >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1: {value}")
    return number


def format_counts(counts: dict) -> str:
    return ', '.join(f"{cat}:{n}" for cat, n in counts.items()) or '-'


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate passwords."""
    from pwgen.generators import default_registry, entropy

    defaults = get_defaults()
    bits = args.bits if args.bits is not None else defaults.bits
    name = args.generator or defaults.generator
    iterations = args.iterations if args.iterations is not None else defaults.iterations

    if args.password is not None and args.site is None:
        out.error("missing required argument: site")
        return 1
    if args.password is not None and args.count > 1:
        out.error("--count cannot be used with a password; the result would repeat")
        return 1

    generator = default_registry().generator_of(name)
    for _ in range(args.count):
        buffer = entropy(bits, args.password, args.site,
                         iterations if args.password is not None else None)
        out.result(generator.generate(buffer))
    return 0


def cmd_list(args, out: Output):
    """List generators with a sample password each."""
    from pwgen.generators import default_registry, random_bytes, size_of

    bits = args.bits if args.bits is not None else get_defaults().sample_bits
    buffer = random_bytes(bits)

    rows = []
    for generator in default_registry():
        constraints = ' '.join(str(c) for c in generator.constraints) or '-'
        rows.append([generator.name, size_of(generator.ranges), constraints,
                     generator.generate(buffer)])

    out.print(f"Generators (samples use {bits} bits of one shared random buffer):\n")
    if out.quiet:
        for row in rows:
            out.result(f"{row[0]}\t{row[3]}")
    else:
        out.table(['Name', 'Chars', 'Constraints', 'Sample'], rows)
    return 0


def cmd_check(args, out: Output):
    """Check a password against a generator's rules."""
    from pwgen.generators import default_registry, Generator

    generator = default_registry().generator_of(args.generator or get_defaults().generator)
    acceptable = generator.is_acceptable(args.password)

    out.print(f"Generator:  {generator.name}")
    out.print(f"Categories: {format_counts(Generator.count_categories(args.password))}")
    out.result("acceptable" if acceptable else "not acceptable")

    if args.repair and not acceptable:
        repaired = generator.make_acceptable(args.password)
        out.print(f"Repaired:   {repaired}  ({format_counts(Generator.count_categories(repaired))})")
    return 0 if acceptable else 2


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pwgen',
        description='pwgen - Deterministic Password Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate
  %(prog)s generate 128 Alphanumeric -n 5
  %(prog)s generate 64 NCName master https://site.io/ 1000
  %(prog)s list
  %(prog)s check 'aB3' -g NCName --repair
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate passwords')
    p.add_argument('bits', nargs='?', type=positive_int, help='Bits of entropy (default: 88)')
    p.add_argument('generator', nargs='?', help='Generator name (default: qwerty)')
    p.add_argument('password', nargs='?', help='Master password for deterministic derivation')
    p.add_argument('site', nargs='?', help='Site used as the derivation salt')
    p.add_argument('iterations', nargs='?', type=positive_int,
                   help='PBKDF2 iterations (default: 1000)')
    p.add_argument('-n', '--count', type=positive_int, default=1,
                   help='Number of random passwords (default: 1)')

    # --- list ---
    p = subparsers.add_parser('list', aliases=['ls', 'l'], help='List generators with samples')
    p.add_argument('--bits', '-b', type=positive_int, help='Bits of entropy for the samples')

    # --- check ---
    p = subparsers.add_parser('check', aliases=['c'], help='Check a password')
    p.add_argument('password', help='Password to check')
    p.add_argument('--generator', '-g', help='Generator name (default: qwerty)')
    p.add_argument('--repair', '-r', action='store_true', help='Show the repaired password')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    # Handle aliases; no command means generate with defaults
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'ls': 'list', 'l': 'list',
        'c': 'check',
    }
    command = cmd_map.get(args.command, args.command) or 'generate'
    if args.command is None:
        args = parser.parse_args(['generate'], namespace=args)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'list': cmd_list,
        'check': cmd_check,
    }

    handler = commands[command]
    try:
        return handler(args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except (ValueError, KeyError, IndexError) as e:
        out.error(str(e))
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
