"""
Glyph inventories for each script the rain can be drawn from.

Each inventory is built once from Unicode ranges and cached. Code points that
are unassigned, control, surrogate or private-use are dropped so every glyph
is something a font can actually draw.
"""

import unicodedata
from enum import Enum
from functools import lru_cache


class CharacterSet(Enum):
    JAPANESE = "japanese"
    HINDI = "hindi"
    TAMIL = "tamil"
    SINHALA = "sinhala"
    KOREAN = "korean"
    JAWI = "jawi"
    MIXED = "mixed"

    @classmethod
    def default(cls) -> "CharacterSet":
        return cls.JAPANESE

    @classmethod
    def all_sets(cls) -> list:
        return list(cls)

    @classmethod
    def from_name(cls, name: str) -> "CharacterSet":
        key = (name or "").strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown character set: {name}") from None

    @property
    def label(self) -> str:
        return _LABELS[self]

    def get_characters(self) -> list:
        return list(_inventory(self))

    def random_character(self, rng) -> str:
        if self is CharacterSet.MIXED:
            return _pick_script(rng).random_character(rng)
        return rng.choice(_inventory(self))

    def next(self) -> "CharacterSet":
        sets = list(CharacterSet)
        return sets[(sets.index(self) + 1) % len(sets)]


_LABELS = {
    CharacterSet.JAPANESE: "Japanese (Katakana)",
    CharacterSet.HINDI: "Hindi (Devanagari)",
    CharacterSet.TAMIL: "Tamil",
    CharacterSet.SINHALA: "Sinhala",
    CharacterSet.KOREAN: "Korean (Hangul)",
    CharacterSet.JAWI: "Jawi (Arabic)",
    CharacterSet.MIXED: "Mixed scripts",
}

_ALIASES = {
    "japanese": CharacterSet.JAPANESE,
    "jp": CharacterSet.JAPANESE,
    "hindi": CharacterSet.HINDI,
    "hi": CharacterSet.HINDI,
    "tamil": CharacterSet.TAMIL,
    "ta": CharacterSet.TAMIL,
    "sinhala": CharacterSet.SINHALA,
    "si": CharacterSet.SINHALA,
    "korean": CharacterSet.KOREAN,
    "ko": CharacterSet.KOREAN,
    "jawi": CharacterSet.JAWI,
    "jw": CharacterSet.JAWI,
    "mixed": CharacterSet.MIXED,
    "mix": CharacterSet.MIXED,
}

# Inclusive ranges and the step to walk them with
_RANGES = {
    CharacterSet.JAPANESE: [(0x30A0, 0x30FF, 1), (0xFF65, 0xFF9F, 1)],
    CharacterSet.HINDI: [(0x0900, 0x097F, 1), (0xA8E0, 0xA8FF, 1)],
    CharacterSet.TAMIL: [(0x0B80, 0x0BFF, 1)],
    CharacterSet.SINHALA: [(0x0D80, 0x0DFF, 1), (0x111E0, 0x111FF, 1)],
    # Every 10th Hangul syllable keeps the inventory a sane size
    CharacterSet.KOREAN: [(0xAC00, 0xD7AF, 10), (0x3130, 0x318F, 1)],
    CharacterSet.JAWI: [(0x0600, 0x06FF, 1), (0x0750, 0x077F, 1), (0x08A0, 0x08FF, 1)],
}

_JAPANESE_EXTRAS = "0123456789.:=*+-<>¦|ﾊﾐﾋｰｳｼﾅﾓﾆｻﾜﾂｵﾘｱﾎﾃﾏｹﾒｴｶｷﾑﾕﾗｾﾈｽﾀﾇﾍ"

_UNDRAWABLE = {"Cn", "Cc", "Cs", "Co"}

# Mixed mode: Japanese half the time, the other scripts share the rest
_MIXED_WEIGHTS = [
    (CharacterSet.JAPANESE, 0.5),
    (CharacterSet.HINDI, 0.1),
    (CharacterSet.TAMIL, 0.1),
    (CharacterSet.SINHALA, 0.1),
    (CharacterSet.KOREAN, 0.1),
    (CharacterSet.JAWI, 0.1),
]


def _drawable(code_point: int) -> bool:
    return unicodedata.category(chr(code_point)) not in _UNDRAWABLE


@lru_cache(maxsize=None)
def _inventory(char_set: CharacterSet) -> tuple:
    if char_set is CharacterSet.MIXED:
        chars = []
        for script, _ in _MIXED_WEIGHTS:
            chars.extend(_inventory(script))
        return tuple(chars)

    chars = []
    for start, end, step in _RANGES[char_set]:
        chars.extend(chr(cp) for cp in range(start, end + 1, step) if _drawable(cp))
    if char_set is CharacterSet.JAPANESE:
        chars.extend(_JAPANESE_EXTRAS)
    return tuple(chars)


def _pick_script(rng) -> CharacterSet:
    roll = rng.random()
    cumulative = 0.0
    for script, weight in _MIXED_WEIGHTS:
        cumulative += weight
        if roll < cumulative:
            return script
    return _MIXED_WEIGHTS[-1][0]


def get_inventory(char_set: CharacterSet) -> list:
    return char_set.get_characters()


def random_glyph(char_set: CharacterSet, rng) -> str:
    return char_set.random_character(rng)
