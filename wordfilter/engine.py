# wordfilter/engine.py
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Optional, Sequence, Union

import regex
from loguru import logger

from .core import Automaton, FilterOptions, Match, canonical_form, canonicalize, normalize_char
from .wordlist import load_override_words, load_profanity_words

if TYPE_CHECKING:  # pragma: no cover
    from .config import Settings

__all__ = ["ProfanityFilter", "mask"]

_WORD_CHAR = regex.compile(r"\w", regex.ASCII)
_RUNS = regex.compile(r"(.)\1+")


def _word_list(words: Optional[Iterable[str]], name: str) -> List[str]:
    if words is None:
        return []
    if isinstance(words, (str, bytes)):
        raise TypeError(f"{name} must be a list of strings, not a single string")
    out = list(words)
    for w in out:
        if not isinstance(w, str):
            raise TypeError(f"{name} entries must be str, got {type(w).__name__}")
    return out


def _is_boundary(text: str, index: int) -> bool:
    if index < 0 or index >= len(text):
        return True
    return normalize_char(text[index]) is None


def mask(text: str, matches: Sequence[Match], mask_char: str = "*") -> str:
    """Replace the word characters covered by ``matches`` with ``mask_char``.

    Punctuation and spaces inside a span are left alone, and overlapping
    spans mask each character once.
    """
    if not matches:
        return text
    chars = list(text)
    masked = set()
    for m in matches:
        for i in range(m.start, m.end):
            if i in masked:
                continue
            if _WORD_CHAR.match(text[i]):
                chars[i] = mask_char
                masked.add(i)
    return "".join(chars)


class ProfanityFilter:
    """Restricted-word detector with an override (allow) list.

    ``words`` are the restricted words, ``override_words`` suppress any
    restricted hit that falls entirely inside one of their occurrences
    (``"notbad"`` hides ``"bad"`` in "not bad").  Both lists are matched in
    canonical form, so spaces and punctuation in them do not matter.
    """

    def __init__(
        self,
        words: Iterable[str],
        override_words: Optional[Iterable[str]] = None,
        options: Union[FilterOptions, Mapping[str, Any], None] = None,
    ) -> None:
        self.options = FilterOptions.coerce(options)
        self._restricted = Automaton.build(_word_list(words, "words"))
        self._override = Automaton.build(_word_list(override_words, "override_words"))
        logger.info(
            f"ProfanityFilter ready ({len(self._restricted)} restricted, "
            f"{len(self._override)} override patterns)"
        )

    @classmethod
    def from_settings(cls, cfg: Optional["Settings"] = None) -> "ProfanityFilter":
        """Build a filter from the configured word sources and policy flags."""
        if cfg is None:
            # settings parse the environment on first import
            from .config import settings as cfg
        return cls(load_profanity_words(cfg), load_override_words(cfg), cfg.filter_options)

    @property
    def words(self):
        return self._restricted.patterns

    @property
    def override_words(self):
        return self._override.patterns

    def __repr__(self) -> str:
        return (
            f"<ProfanityFilter restricted={len(self._restricted)} "
            f"override={len(self._override)} options={self.options}>"
        )

    def find(self, text: str) -> List[Match]:
        canon = canonicalize(text)
        matches = [
            m for m in self._restricted.run(canon.chars, canon.positions) if self._keep(text, m)
        ]
        if matches and self._override:
            allowed = self._override.run(canon.chars, canon.positions)
            if allowed:
                matches = [
                    b for b in matches
                    if not any(b.start >= w.start and b.end <= w.end for w in allowed)
                ]
        if matches and self.options.log_profanity:
            logger.info(f"Profanity detected: {len(matches)} match(es) {[m.word for m in matches]}")
        return matches

    def _keep(self, text: str, m: Match) -> bool:
        opts = self.options
        if opts.word_boundary:
            bounded = _is_boundary(text, m.start - 1) and _is_boundary(text, m.end)
            if not bounded and not opts.allow_compound:
                return False
        # the original slice has to reduce to the pattern again
        form = canonical_form(text[m.start:m.end])
        if opts.word_boundary:
            return form == m.word
        return _RUNS.sub(r"\1", form) == _RUNS.sub(r"\1", m.word)

    def contains(self, text: str) -> bool:
        return len(self.find(text)) > 0

    is_profane = contains

    def censor(self, text: str, mask_char: str = "*") -> str:
        if len(mask_char) != 1:
            raise ValueError("mask_char must be a single character")
        return mask(text, self.find(text), mask_char)
