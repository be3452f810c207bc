# wordfilter/core/normalize.py
"""Character normalization and repeat squashing.

Every character of scanned text and of pattern words goes through
:func:`normalize_char`, so both sides share one canonical alphabet
(lowercase ASCII letters and digits).  Lookalike letters, lookalike digits
and leet substitutions are folded onto that alphabet; spaces, punctuation,
emoji and anything unrecognised are dropped.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Optional

from .types import CanonicalText

__all__ = [
    "HOMOGLYPH_LETTERS",
    "HOMOGLYPH_DIGITS",
    "LEET",
    "NOISE_CHARS",
    "MAX_REPEAT",
    "normalize_char",
    "is_noise",
    "squash_repeats",
    "canonicalize",
    "canonical_form",
]

# Longest run of one canonical character that survives squashing.
MAX_REPEAT = 2

_LETTERS = "abcdefghijklmnopqrstuvwxyz"


def _alphabet(first: int) -> Dict[str, str]:
    """Map 26 consecutive code points starting at ``first`` onto a-z."""
    return {chr(first + i): letter for i, letter in enumerate(_LETTERS)}


def _digits(first: int, start: int = 0) -> Dict[str, str]:
    return {chr(first + i): str(d) for i, d in enumerate(range(start, 10))}


def _group(letter: str, chars: str) -> Dict[str, str]:
    return {c: letter for c in chars}


# Keys are already lowercased; the lookup happens after ``str.lower``.
HOMOGLYPH_LETTERS: Dict[str, str] = {}
for _letter, _chars in (
    ("a", "àáâãäåāăąǎȁȃạảấầẩẫậắằẳẵặαάаᴀɑª"),
    ("b", "ßβвʙьḃḅḇƀɓ"),
    ("c", "çćĉċčсⅽ¢ςƈȼ"),
    ("d", "ďđɗᶁḋḍðⅾ"),
    ("e", "èéêëēĕėęěȅȇẹẻẽếềểễệεέеёє℮€ɛǝə"),
    ("f", "ƒғḟ"),
    ("g", "ğĝġģɡǧǵɠ"),
    ("h", "ĥħнʜḣḥһ"),
    ("i", "ìíîïĩīĭįıǐȉȋỉịιίϊіїⅰ|ɪ¡"),
    ("j", "ĵјǰʝ"),
    ("k", "ķĸκкᴋǩḱќ"),
    ("l", "ĺļľŀłⅼɫḷӏℓ"),
    ("m", "мᴍṁṃⅿ"),
    ("n", "ñńņňŉŋηήпǹṅṇɴ"),
    ("o", "òóôõöōŏőơøǒȍȏọỏốồổỗộớờởỡợοόо°○◯σᴏº"),
    ("p", "ρрᴘṗ"),
    ("q", "ԛɋ"),
    ("r", "ŕŗřʀȑȓṙṛɾ"),
    ("s", "śŝşšѕșṡṣʂꜱ§"),
    ("t", "ţťŧтțṫṭτᴛ†"),
    ("u", "ùúûüũūŭůűųǔǖǘǚǜưụủυύꞟµᴜ"),
    ("v", "ѵνᴠṽṿ"),
    ("w", "ŵωшẁẃẅẇẉѡᴡ"),
    ("x", "χхⅹẋẍ×"),
    ("y", "ýÿŷγуү¥ỳỵỷỹўʏ"),
    ("z", "źżžᴢẑẓƶʐ"),
):
    HOMOGLYPH_LETTERS.update(_group(_letter, _chars))

for _first in (
    0xFF41,   # fullwidth
    0x24D0,   # circled
    0x249C,   # parenthesized
    0x1F130,  # squared
    0x1F150,  # negative circled
    0x1F170,  # negative squared
    0x1F1E6,  # regional indicators
    0x1D400, 0x1D41A,  # mathematical bold
    0x1D468, 0x1D482,  # mathematical bold italic
    0x1D4D0, 0x1D4EA,  # mathematical bold script
    0x1D56C, 0x1D586,  # mathematical bold fraktur
    0x1D5A0, 0x1D5BA,  # mathematical sans-serif
    0x1D5D4, 0x1D5EE,  # mathematical sans-serif bold
    0x1D608, 0x1D622,  # mathematical sans-serif italic
    0x1D63C, 0x1D656,  # mathematical sans-serif bold italic
    0x1D670, 0x1D68A,  # mathematical monospace
):
    HOMOGLYPH_LETTERS.update(_alphabet(_first))

HOMOGLYPH_DIGITS: Dict[str, str] = {
    "⓪": "0", "⓿": "0", "⁰": "0",
    "¹": "1", "²": "2", "³": "3",
}
for _first, _start in (
    (0x2460, 1),   # circled
    (0x2474, 1),   # parenthesized
    (0x2488, 1),   # digit full stop
    (0x2776, 1),   # dingbat negative circled
    (0x2074, 4),   # superscript
    (0x2080, 0),   # subscript
    (0xFF10, 0),   # fullwidth
    (0x1D7CE, 0),  # mathematical bold
    (0x1D7D8, 0),  # mathematical double-struck
    (0x1D7E2, 0),  # mathematical sans-serif
    (0x1D7EC, 0),  # mathematical sans-serif bold
    (0x1D7F6, 0),  # mathematical monospace
):
    HOMOGLYPH_DIGITS.update(_digits(_first, _start))

LEET: Dict[str, str] = {
    "0": "o", "1": "i", "2": "z", "3": "e", "4": "a",
    "5": "s", "6": "g", "7": "t", "8": "b", "9": "g",
    "@": "a", "$": "s", "!": "i", "+": "t",
    "(": "c", "[": "c", "{": "c",
}

NOISE_CHARS: FrozenSet[str] = frozenset(
    # ASCII whitespace and punctuation
    " \t\n\r\v\f"
    ".,-_~`/\\*=)]}'\":;?<>#%^&"
    # Unicode spaces, separators and zero-width characters
    "\u00a0\u00ad\u1680\u180e"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u200b\u200c\u200d\u2028\u2029\u202f\u205f\u2060\u3000\ufeff"
    # dashes, bullets, quotes
    "‐‑‒–—―·•‧∙⋅…‘’‚“”„«»‹›¿"
)


def normalize_char(ch: str) -> Optional[str]:
    """Return the canonical character for ``ch`` or ``None`` when it is dropped."""
    lower = ch.lower()
    if len(lower) > 1:
        # e.g. "İ" lowercases to "i" + COMBINING DOT ABOVE
        lower = lower[0]
    for table in (HOMOGLYPH_LETTERS, HOMOGLYPH_DIGITS, LEET):
        hit = table.get(lower)
        if hit is not None:
            return hit
    if "a" <= lower <= "z":
        return lower
    # noise and everything else (emoji, symbols, combining marks) is dropped
    return None


def is_noise(ch: str) -> bool:
    """True for whitespace, punctuation and separator glyphs."""
    return ch in NOISE_CHARS


def squash_repeats(s: str) -> str:
    """Collapse runs of 3+ identical characters to exactly two."""
    out: List[str] = []
    run = 0
    for c in s:
        if out and out[-1] == c:
            run += 1
        else:
            run = 1
        if run <= MAX_REPEAT:
            out.append(c)
    return "".join(out)


def canonicalize(text: str) -> CanonicalText:
    """Normalize ``text`` and record the original index of every kept character.

    Squashing happens in the same pass.  Any dropped character ends the
    current run.
    """
    chars: List[str] = []
    positions: List[int] = []
    prev: Optional[str] = None
    run = 0
    for i, ch in enumerate(text):
        n = normalize_char(ch)
        if n is None:
            prev, run = None, 0
            continue
        if n == prev:
            run += 1
            if run > MAX_REPEAT:
                continue
        else:
            prev, run = n, 1
        chars.append(n)
        positions.append(i)
    return CanonicalText(chars, positions)


def canonical_form(word: str) -> str:
    """Canonical spelling of a pattern word: normalized, no whitespace, squashed."""
    out: List[str] = []
    # per character, like canonicalize; str.lower() would apply final sigma
    for ch in word:
        if ch.isspace():
            continue
        n = normalize_char(ch)
        if n is not None:
            out.append(n)
    return squash_repeats("".join(out))
