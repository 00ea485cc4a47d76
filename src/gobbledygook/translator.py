"""Fake translation: right-to-left, upside-down English.

Fake translation is the process of algorithmically translating text into something
that can visibly be seen to derive from the original text, but is also significantly different.
Once a portion of the UI is "translated", you can scan it to make sure all user facing strings
were extracted, since anything left readable was missed.

Concretely, this tests a few things at once:
1. rendering of right-to-left languages
2. string extraction and markup
3. the substitution system, and its ability to let translators reposition things
   (like moving a link to the start of a sentence, and still substituting its URL correctly)

For example:
    real - Please close this window, <a %s>enable cookies</a> and try again
    fake - uıaƃa ʎɹʇ pua <a %s>sǝıʞooɔ ǝʅqauǝ</a> ´ʍopuıʍ sıɥʇ ǝsoʅɔ ǝsaǝʅԀ

The text is reversed, but the HTML tags are not, and neither are substitution markers.
If `%(cookieLink)` became `)ʞuı⅂ǝıʞooɔ(%`, substitution would break.
"""

import regex as re

from gobbledygook.glyphs import flip_text
from gobbledygook.tokenizer import Container, Marker, Text, Token, tokenize

grapheme_pattern = re.compile(r"\X")


def split_graphemes(text: str) -> list[str]:
    """Split text into user-perceived characters, so accents and emoji sequences stay intact when reversed."""
    return grapheme_pattern.findall(text)


def translate_tokens(tokens: list[Token]) -> list[Token]:
    """Flip the characters of all text tokens, in place. Order is left alone; see `stringify`."""
    for token in tokens:
        if isinstance(token, Text):
            token.value = flip_text(token.value)
        elif isinstance(token, Container):
            translate_tokens(token.children)
        # markers are left alone
    return tokens

def stringify(tokens: list[Token]) -> str:
    """Join tokens into a string in reverse order, reversing the text within them too.

    Containers keep their tags on the outside of their (reversed) content.
    """
    parts: list[str] = []
    for token in reversed(tokens):
        if isinstance(token, Container):
            parts.append(token.opening + stringify(token.children) + token.closing)
        elif isinstance(token, Marker):
            parts.append(token.value)
        else:
            parts.append("".join(reversed(split_graphemes(token.value))))
    return "".join(parts)

def translate(text: str) -> str:
    """Fake-translate a string."""
    if not isinstance(text, str):
        raise TypeError(f"Expected a string to translate, got {type(text).__name__}")
    return stringify(translate_tokens(tokenize(text)))
