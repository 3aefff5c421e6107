"""Text → Braille character substitution (uncontracted, one glyph per character)."""

from __future__ import annotations

from types import MappingProxyType

# Letters, space, punctuation and digits. Digits use lower-cell glyphs
# with no number sign, so '1' and ',' map to the same character.
BRAILLE_TABLE = MappingProxyType({
    "a": "⠁", "b": "⠃", "c": "⠉", "d": "⠙", "e": "⠑",
    "f": "⠋", "g": "⠛", "h": "⠓", "i": "⠊", "j": "⠚",
    "k": "⠅", "l": "⠇", "m": "⠍", "n": "⠝", "o": "⠕",
    "p": "⠏", "q": "⠟", "r": "⠗", "s": "⠎", "t": "⠞",
    "u": "⠥", "v": "⠧", "w": "⠺", "x": "⠭", "y": "⠽",
    "z": "⠵", " ": "⠀", ",": "⠂", ";": "⠆", ":": "⠒",
    ".": "⠲", "?": "⠦", "!": "⠖", "'": "⠄", '"': "⠐",
    "-": "⠤", "1": "⠂", "2": "⠆", "3": "⠒", "4": "⠲",
    "5": "⠢", "6": "⠖", "7": "⠶", "8": "⠦", "9": "⠔",
    "0": "⠴",
})


def text_to_braille(text: str) -> str:
    """Lowercase ``text`` and substitute every mapped character; others pass through."""
    return "".join(BRAILLE_TABLE.get(ch, ch) for ch in text.lower())
