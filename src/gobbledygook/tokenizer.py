"""Splits a UI string into text, placeholder markers, and markup containers.

Yes, this uses regular expressions to handle HTML.
The markup in translatable strings is kept to a minimum, simple tags marking
the boundaries of phrases within a sentence, where context matters to translators.
Anything fancier than `<tag ...>...</tag>` is not supported and is treated as text.
"""

import logging

import regex as re

log = logging.getLogger(__name__)

MARKER_PATTERN = r"%s|%\([^)]+\)"
"""Substitution markers: `%s` or `%(name)`"""

CONTAINER_PATTERN = r"<[^>]+>.*</[^>]+>"
"""From the first opening tag to the last closing tag. Greedy, so nested tags end up inside."""

split_pattern = re.compile(f"({MARKER_PATTERN}|{CONTAINER_PATTERN})")
marker_pattern = re.compile(MARKER_PATTERN)
container_pattern = re.compile(r"^(<[^>]+>)(.*)(</[^>]+>)$")


class Token:
    """A fragment of a tokenized string."""

    def __init__(self, value: str) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class Text(Token):
    """Plain text, to be flipped."""


class Marker(Token):
    """A substitution marker such as `%s` or `%(name)`, which must be kept exactly as is."""


class Container(Token):
    """Markup wrapping a phrase, like `<a href="%s">...</a>`.

    The tags are kept exactly as is, while the content is tokenized like any other string.
    """

    def __init__(self, opening: str, closing: str, children: list[Token]) -> None:
        self.opening = opening
        """The opening tag, e.g. `<a %s>`"""
        self.closing = closing
        """The closing tag, e.g. `</a>`"""
        self.children = children
        """Tokens between the tags."""

    @property
    def value(self) -> str:
        """The original markup including tags. (Read-only, derived from the children.)"""
        return self.opening + detokenize(self.children) + self.closing

    def __repr__(self) -> str:
        return f"Container({self.opening!r}, {self.closing!r}, {self.children!r})"


def tokenize(text: str) -> list[Token]:
    """Turn a string into a list of tokens, recursing into markup."""
    tokens: list[Token] = []
    # Odd indices are the captured markers and containers.
    for index, fragment in enumerate(split_pattern.split(text)):
        if not fragment:
            continue
        if index % 2 == 1 and marker_pattern.fullmatch(fragment):
            tokens.append(Marker(fragment))
        elif fragment.startswith("<"):
            tokens.append(parse_container(fragment))
        else:
            tokens.append(Text(fragment))
    return tokens

def parse_container(fragment: str) -> Token:
    """Parse markup into a Container, or fall back to Text if the tags don't pair up."""
    # NOTE: This is a greedy match. Together with recursion, that handles nested tags.
    match = container_pattern.match(fragment)
    if match is None:
        log.debug("Treating unmatched markup as text: %r", fragment)
        return Text(fragment)
    opening, inner, closing = match.groups()
    return Container(opening, closing, tokenize(inner))

def detokenize(tokens: list[Token]) -> str:
    """Join tokens back together in their original order, reproducing the tokenized string."""
    return "".join(token.value for token in tokens)
