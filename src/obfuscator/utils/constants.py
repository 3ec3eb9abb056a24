"""Built-in symbol tables for name alphabets.

The kana tables pair each hiragana with its katakana counterpart, so mixed-case
kana names use exactly twice the lower-case symbols.  Small katakana ``ヵ`` has
no hiragana partner here and is left out.  Older kana name generators that
keep it place ``ヵ`` after ``ォ``, so their mixed-case sequences agree with
this one only up to symbol offset 105 and diverge from ``ャ`` (offset 106) on.
"""

from __future__ import annotations

__all__ = [
    "HIRAGANA_CHARACTERS",
    "KATAKANA_CHARACTERS",
    "LATIN_LOWER_CHARACTERS",
    "LATIN_UPPER_CHARACTERS",
    "PRESETS",
]

HIRAGANA_CHARACTERS: str = (
    "あいうえお"  # A row
    "かきくけこ"  # KA row
    "さしすせそ"  # SA row
    "たちつてと"  # TA row
    "なにぬねの"  # NA row
    "はひふへほ"  # HA row
    "まみむめも"  # MA row
    "やゆよ"  # YA row
    "らりるれろ"  # RA row
    "わをん"  # WA row
    "ぁぃぅぇぉ"  # A row, small
    "ゃゅょ"  # YA row, small
    "ゎ"  # WA row, small
)

# Position for position the katakana counterpart of HIRAGANA_CHARACTERS.
KATAKANA_CHARACTERS: str = (
    "アイウエオ"
    "カキクケコ"
    "サシスセソ"
    "タチツテト"
    "ナニヌネノ"
    "ハヒフヘホ"
    "マミムメモ"
    "ヤユヨ"
    "ラリルレロ"
    "ワヲン"
    "ァィゥェォ"
    "ャュョ"
    "ヮ"
)

LATIN_LOWER_CHARACTERS: str = "abcdefghijklmnopqrstuvwxyz"
LATIN_UPPER_CHARACTERS: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# preset name -> (lower symbols, upper symbols)
PRESETS: dict[str, tuple[str, str]] = {
    "kana": (HIRAGANA_CHARACTERS, KATAKANA_CHARACTERS),
    "latin": (LATIN_LOWER_CHARACTERS, LATIN_UPPER_CHARACTERS),
}
