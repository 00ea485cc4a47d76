"""Upside-down glyph table, mapping Latin letters, digits and punctuation to look-alike flipped characters."""

SOURCE_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!@#$%^&*()-_=+\\|`~[{]};:'\",<.>/?"
"""Characters that get flipped. Anything else passes through unchanged."""

# Lowercase "a" maps to itself, to keep existing fake translations unchanged,
# since they were generated without flipping it. ɐ would be the flipped glyph.
TARGET_ALPHABET = "aqɔpǝɟƃɥıɾʞʅɯuodbɹsʇnʌʍxʎz∀ԐↃᗡƎℲ⅁HIſӼ⅂WNOԀÒᴚS⊥∩ɅＭX⅄Z0123456789¡@#$%ᵥ⅋⁎()-_=+\\|,~[{]};:,„´<.>/¿"
"""Flipped counterparts, index-aligned with SOURCE_ALPHABET."""

assert len(SOURCE_ALPHABET) == len(TARGET_ALPHABET), "Glyph alphabets must be the same length"
assert len(set(SOURCE_ALPHABET)) == len(SOURCE_ALPHABET), "SOURCE_ALPHABET must not contain duplicates"

GLYPH_TABLE: dict[str, str] = dict(zip(SOURCE_ALPHABET, TARGET_ALPHABET))
"""Source character to flipped character."""


def lookup(char: str) -> str:
    """Returns the flipped glyph for a character, or the character itself if it has none."""
    if char in GLYPH_TABLE:
        return GLYPH_TABLE[char]
    return char

def flip_text(text: str) -> str:
    """Flips each character of a run of text, keeping the characters in their original order."""
    return "".join(lookup(char) for char in text)


if __name__ == "__main__":
    import argparse
    from rich import print
    from rich.text import Text
    parser = argparse.ArgumentParser(description="Flip characters upside-down, without reordering them.")
    parser.add_argument("text", help="Text to flip")
    parser.add_argument("--reverse", action="store_true", help="Also reverse the character order, for right-to-left reading")

    args = parser.parse_args()
    flipped = flip_text(args.text)
    print(Text(flipped[::-1] if args.reverse else flipped))
