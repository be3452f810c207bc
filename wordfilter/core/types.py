from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

__all__ = ["Match", "FilterOptions", "CanonicalText"]


@dataclass(frozen=True)
class Match:
    """One restricted-word hit; ``start``/``end`` index the original text, end exclusive."""

    word: str
    start: int
    end: int

    @property
    def span(self) -> Tuple[int, int]:
        return self.start, self.end

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# camelCase spellings accepted by FilterOptions.coerce
_OPTION_ALIASES = {
    "wordBoundary": "word_boundary",
    "allowCompound": "allow_compound",
    "logProfanity": "log_profanity",
}


@dataclass(frozen=True)
class FilterOptions:
    word_boundary: bool = False
    allow_compound: bool = False
    log_profanity: bool = False

    @classmethod
    def coerce(cls, value: "Optional[FilterOptions | Mapping[str, Any]]") -> "FilterOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            kwargs = {}
            for k, v in value.items():
                if not isinstance(v, bool):
                    raise TypeError(f"option {k!r} must be a bool, not {type(v).__name__}")
                kwargs[_OPTION_ALIASES.get(k, k)] = v
            return cls(**kwargs)
        raise TypeError(f"options must be FilterOptions or a mapping, not {type(value).__name__}")


@dataclass
class CanonicalText:
    """Canonical characters of one input plus the original index of each."""

    chars: List[str] = field(default_factory=list)
    positions: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.chars)

    def __str__(self) -> str:
        return "".join(self.chars)
