"""Command line arguments."""

import argparse

from gobbledygook import __version__

parser = argparse.ArgumentParser(description='Fake-translate UI strings into upside-down, right-to-left English.', usage='%(prog)s [options] [text ...]', prog="gobbledygook")
parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
parser.add_argument('--show-tokens', action='store_true', help='Show how each string is tokenized, as well as its translation')
parser.add_argument('--catalog', default=None, metavar="FILE", help='JSON file containing a list of strings, or an object of strings, to translate all at once')
parser.add_argument('--output', '-o', default=None, metavar="FILE", help='Where to write the translated catalog. By default it is printed.')
parser.add_argument('--self-test', action='store_true', help='Translate known samples and report whether they match, exiting with a non-zero status on any mismatch')
parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

parser.add_argument('text', nargs='*', default=[], help='Strings to translate. If none are given (and no other mode is selected), lines are read from standard input.')

def get_help_text() -> str:
    """Get the help text for the command line arguments."""
    return parser.format_help()

__all__ = ["parser", "get_help_text"]
