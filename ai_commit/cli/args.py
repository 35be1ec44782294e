"""CLI Argument Parsing"""

import argparse
import sys

import argcomplete

from ai_commit import __version__


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    argv = sys.argv[1:] if argv is None else list(argv)

    parser = argparse.ArgumentParser(
        prog='ai-commit',
        description='Generate a conventional commit message for the staged changes using Gemini',
        epilog='Example: git commit -m "$(ai-commit fixing the login redirect)"',
        allow_abbrev=False,
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('hint', nargs='*', metavar='HINT', help='Optional free-text context for the model')

    argcomplete.autocomplete(parser)
    args, _ = parser.parse_known_args(argv)
    # Every word is hint text in the order given, including ones that look like flags
    args.hint = argv
    return args


def join_hint(words: list[str]) -> str:
    """Join positional hint words with single spaces."""
    return ' '.join(words)
