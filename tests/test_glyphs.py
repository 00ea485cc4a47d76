"""Tests for the glyph table."""

import pytest

from gobbledygook import glyphs
from gobbledygook.glyphs import GLYPH_TABLE, SOURCE_ALPHABET, TARGET_ALPHABET, flip_text, lookup


def test_alphabet_sizes():
    letters = [char for char in SOURCE_ALPHABET if char.isalpha()]
    digits = [char for char in SOURCE_ALPHABET if char.isdigit()]
    assert len(letters) == 52
    assert len(digits) == 10
    assert len(SOURCE_ALPHABET) == len(TARGET_ALPHABET) == 94
    assert len(GLYPH_TABLE) == len(SOURCE_ALPHABET)

@pytest.mark.parametrize("index", range(len(SOURCE_ALPHABET)))
def test_every_character_maps_to_the_glyph_at_the_same_index(index: int):
    assert lookup(SOURCE_ALPHABET[index]) == TARGET_ALPHABET[index]

def test_first_entry_maps_to_itself():
    # This only pins the table entry; "a" is left unflipped on purpose.
    assert SOURCE_ALPHABET.index("a") == 0
    assert lookup("a") == TARGET_ALPHABET[0] == "a"

def test_first_entry_is_looked_up(monkeypatch: pytest.MonkeyPatch):
    # With a distinct glyph at index 0, the lookup must still find it.
    monkeypatch.setattr(glyphs, "GLYPH_TABLE", dict(zip(SOURCE_ALPHABET, "ɐ" + TARGET_ALPHABET[1:])))
    assert lookup("a") == "ɐ"
    assert glyphs.flip_text("aa") == "ɐɐ"

def test_some_known_glyphs():
    assert lookup("e") == "ǝ"
    assert lookup("P") == "Ԁ"
    assert lookup("!") == "¡"
    assert lookup("?") == "¿"
    assert lookup(",") == "´"
    assert lookup("'") == ","
    assert lookup('"') == "„"
    assert lookup("7") == "7"

@pytest.mark.parametrize("char", [" ", "\t", "\n", "é", "ɐ", "日", "€", "🙃"])
def test_unmapped_characters_pass_through(char: str):
    assert char not in GLYPH_TABLE
    assert lookup(char) == char

def test_flip_text_keeps_order():
    assert flip_text("hello, world") == "ɥǝʅʅo´ ʍoɹʅp"
    assert flip_text("") == ""

def test_flip_text_is_deterministic():
    assert flip_text(SOURCE_ALPHABET) == TARGET_ALPHABET
    assert flip_text(SOURCE_ALPHABET) == flip_text(SOURCE_ALPHABET)
