"""Matching core: normalizer, automaton and the shared value types."""

from .automaton import Automaton
from .normalize import canonical_form, canonicalize, is_noise, normalize_char, squash_repeats
from .types import CanonicalText, FilterOptions, Match

__all__ = [
    "Automaton",
    "CanonicalText",
    "FilterOptions",
    "Match",
    "canonical_form",
    "canonicalize",
    "is_noise",
    "normalize_char",
    "squash_repeats",
]
