from __future__ import annotations

from typing import Tuple

JAPANESE_KANA_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x3040, 0x309F),  # Hiragana
    (0x30A0, 0x30FF),  # Katakana
    (0x31F0, 0x31FF),  # Katakana phonetic extensions
)


def _is_kana(ch: str) -> bool:
    code = ord(ch)
    for low, high in JAPANESE_KANA_RANGES:
        if low <= code <= high:
            return True
    return False


def contains_japanese(text: str) -> bool:
    """Return True as soon as a kana character is found.

    Kanji alone are not enough (they are shared with Chinese), and mixed
    strings count as Japanese if any single kana is present.
    """
    return any(_is_kana(ch) for ch in text)
