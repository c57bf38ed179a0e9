"""Command-line interface for GedSoundex."""

import argparse
import logging
import sys
from typing import Optional

from .. import __version__
from ..core.codes import soundex_codes_match
from ..core.soundex import algorithms, soundex
from ..matching import SoundexMatcher


def add_algorithm_argument(parser: argparse.ArgumentParser) -> None:
    """Add the --algorithm option to a subcommand parser."""
    parser.add_argument(
        '-a', '--algorithm',
        choices=sorted(algorithms()),
        default='dm',
        help='Soundex algorithm: std (Russell) or dm (Daitch-Mokotoff) (default: dm)'
    )


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def encode_command(args: argparse.Namespace) -> int:
    """Execute the encode command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    for text in args.text:
        print(f"{text}\t{soundex(text, args.algorithm)}")
    return 0


def compare_command(args: argparse.Namespace) -> int:
    """Execute the compare command."""
    codes1 = soundex(args.text1, args.algorithm)
    codes2 = soundex(args.text2, args.algorithm)

    print(f"{args.text1}\t{codes1}")
    print(f"{args.text2}\t{codes2}")
    print("MATCH" if soundex_codes_match(codes1, codes2) else "NO MATCH")
    return 0


def match_command(args: argparse.Namespace) -> int:
    """Execute the match command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    matcher = SoundexMatcher(args.algorithm)
    matches = matcher.find_matches(args.query, args.candidates, limit=args.limit)

    if not matches:
        print(f"No names sound like {args.query}")
        return 0

    print(f"\nNAMES SOUNDING LIKE {args.query.upper()}:")
    print("-" * 60)

    for i, match in enumerate(matches):
        print(f"{i + 1}. {match.name} ({match.similarity:.1f}%)")
        print(f"   Shared codes: {', '.join(match.shared_codes)}")

    print("-" * 60 + "\n")
    return 0


def algorithms_command(args: argparse.Namespace) -> int:
    """Execute the algorithms command."""
    for identifier, name in algorithms().items():
        print(f"{identifier}\t{name}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='gedsoundex',
        description='Phonetic (soundex) codes for matching genealogical names.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    # Create subparsers for different commands
    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands'
    )

    # Encode command
    encode_parser = subparsers.add_parser(
        'encode',
        help='Print the soundex codes of names'
    )
    encode_parser.add_argument(
        'text',
        nargs='+',
        help='Names to encode (quote names containing spaces)'
    )
    add_algorithm_argument(encode_parser)

    # Compare command
    compare_parser = subparsers.add_parser(
        'compare',
        help='Check whether two names sound alike'
    )
    compare_parser.add_argument('text1', help='First name')
    compare_parser.add_argument('text2', help='Second name')
    add_algorithm_argument(compare_parser)

    # Match command
    match_parser = subparsers.add_parser(
        'match',
        help='Find the names that sound like a query name'
    )
    match_parser.add_argument('query', help='Name to search for')
    match_parser.add_argument(
        'candidates',
        nargs='+',
        help='Names to search'
    )
    match_parser.add_argument(
        '-n', '--limit',
        type=positive_int,
        default=None,
        help='Maximum number of matches to display'
    )
    add_algorithm_argument(match_parser)

    # Algorithms command
    subparsers.add_parser(
        'algorithms',
        help='List the supported soundex algorithms'
    )

    return parser


COMMANDS = {
    'encode': encode_command,
    'compare': compare_command,
    'match': match_command,
    'algorithms': algorithms_command,
}


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    # If no command specified, print help
    if not args.command:
        parser.print_help()
        return 0

    try:
        return COMMANDS[args.command](args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
