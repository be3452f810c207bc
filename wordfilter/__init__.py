"""Restricted-word detection and masking.

Typical use::

    from wordfilter import ProfanityFilter

    f = ProfanityFilter(["bad", "evil"], override_words=["notbad"])
    f.find("That was n0t b@d, but very evil!")
    f.censor("very evil!")  # -> "very ****!"
"""

from .core import Automaton, CanonicalText, FilterOptions, Match, canonical_form, canonicalize, normalize_char
from .engine import ProfanityFilter, mask

__all__ = [
    "Automaton",
    "CanonicalText",
    "FilterOptions",
    "Match",
    "ProfanityFilter",
    "canonical_form",
    "canonicalize",
    "mask",
    "normalize_char",
]

__version__ = "0.1.0"
