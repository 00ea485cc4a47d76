"""Entry point for the command line interface."""

import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from gobbledygook.args import parser
from gobbledygook.catalog import CatalogFormatError, dump_localizations, translate_catalog_file
from gobbledygook.samples import SAMPLES, run_samples
from gobbledygook.tokenizer import tokenize
from gobbledygook.translator import translate
from gobbledygook.visualize import visualize_tokens

console = Console(highlight=False, soft_wrap=True)
error_console = Console(stderr=True, highlight=False, soft_wrap=True)


def setup_logging(verbose: bool) -> logging.Logger:
    """Send the package's log messages to stderr, replacing any handlers from a previous call."""
    logger = logging.getLogger("gobbledygook")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.handlers = []
    handler = RichHandler(console=error_console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger

def self_test() -> int:
    """Check the known samples, printing any mismatches. Returns an exit code."""
    failures = run_samples()
    for failure in failures:
        console.print(Text(f"failure!  expected: {failure.sample.expected}"))
        console.print(Text(f"               got: {failure.actual}"))
    passed = len(SAMPLES) - len(failures)
    console.print(f"{passed}/{len(SAMPLES)} tests pass", markup=False)
    return 0 if not failures else 1

def print_translation(text: str, show_tokens: bool) -> None:
    if show_tokens:
        console.print(visualize_tokens(tokenize(text), label=text))
    console.print(Text(translate(text)))

def main(argv: list[str] | None = None) -> int:
    args = parser.parse_args(argv)
    if args.self_test and (args.catalog or args.text):
        parser.error("--self-test can't be combined with --catalog or text to translate")
    if args.catalog and args.text:
        parser.error("--catalog can't be combined with text to translate")
    if args.output and not args.catalog:
        parser.error("--output requires --catalog")
    setup_logging(args.verbose)

    if args.self_test:
        return self_test()

    if args.catalog:
        try:
            localizations = translate_catalog_file(args.catalog, args.output)
        except FileNotFoundError:
            error_console.print(Text(f"Could not find catalog file '{args.catalog}'."))
            return 1
        except json.decoder.JSONDecodeError as e:
            error_console.print(Text(f"Could not parse catalog file '{args.catalog}': {e}"))
            return 1
        except CatalogFormatError as e:
            error_console.print(Text(f"Invalid catalog file '{args.catalog}': {e}"))
            return 1
        except Exception as e:
            error_console.print(Text(f"Could not load catalog file '{args.catalog}': {e}"))
            return 1
        if args.output is None:
            console.print(Text(dump_localizations(localizations).rstrip("\n")))
        return 0

    if args.text:
        for text in args.text:
            print_translation(text, args.show_tokens)
    else:
        for line in sys.stdin:
            print_translation(line.rstrip("\r\n"), args.show_tokens)
    return 0


if __name__ == "__main__":
    sys.exit(main())
