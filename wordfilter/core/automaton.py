# wordfilter/core/automaton.py
"""Aho-Corasick automaton over canonical characters.

Nodes live in a flat list; children and failure links are list indices, and
node 0 is the root.  Every node's ``output`` already holds the patterns of
its whole failure chain, so matching never walks links to report hits.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Iterable, Iterator, List, Sequence, Tuple

from loguru import logger

from .normalize import canonical_form
from .types import Match

__all__ = ["Automaton"]

ROOT = 0


@dataclass
class _Node:
    children: Dict[str, int] = field(default_factory=dict)
    fail: int = ROOT
    output: List[str] = field(default_factory=list)


class Automaton:
    """Immutable multi-pattern matcher; build it with :meth:`build`."""

    def __init__(self) -> None:
        self._nodes: List[_Node] = [_Node()]
        self._patterns: List[str] = []

    @classmethod
    def build(cls, words: Iterable[str]) -> "Automaton":
        ac = cls()
        for word in words:
            ac._insert(word)
        ac._link()
        logger.debug(f"Automaton built: {len(ac._patterns)} patterns, {len(ac._nodes)} nodes")
        return ac

    def _insert(self, word: str) -> None:
        pattern = canonical_form(word)
        if not pattern:
            logger.debug(f"Skipping word with empty canonical form: {word!r}")
            return
        node = ROOT
        for ch in pattern:
            nxt = self._nodes[node].children.get(ch)
            if nxt is None:
                nxt = len(self._nodes)
                self._nodes[node].children[ch] = nxt
                self._nodes.append(_Node())
            node = nxt
        out = self._nodes[node].output
        if pattern not in out:
            out.append(pattern)
            self._patterns.append(pattern)

    def _link(self) -> None:
        nodes = self._nodes
        queue: Deque[int] = deque()
        for child in nodes[ROOT].children.values():
            nodes[child].fail = ROOT
            queue.append(child)

        while queue:
            current = queue.popleft()
            for ch, child in nodes[current].children.items():
                queue.append(child)
                f = nodes[current].fail
                while f != ROOT and ch not in nodes[f].children:
                    f = nodes[f].fail
                target = nodes[f].children.get(ch, ROOT)
                nodes[child].fail = target
                nodes[child].output.extend(nodes[target].output)

    @property
    def patterns(self) -> Tuple[str, ...]:
        """Canonical patterns in insertion order, without duplicates."""
        return tuple(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, word: str) -> bool:
        return canonical_form(word) in self._patterns

    def scan(self, chars: Sequence[str]) -> Iterator[Tuple[str, int, int]]:
        """Yield ``(pattern, start, end)`` over canonical indices, both inclusive."""
        nodes = self._nodes
        state = ROOT
        for i, ch in enumerate(chars):
            while state != ROOT and ch not in nodes[state].children:
                state = nodes[state].fail
            state = nodes[state].children.get(ch, ROOT)
            for pattern in nodes[state].output:
                start = i - len(pattern) + 1
                if start >= 0:
                    yield pattern, start, i

    def run(self, chars: Sequence[str], positions: Sequence[int]) -> List[Match]:
        """Report every occurrence, mapped back to original-text offsets."""
        return [
            Match(pattern, positions[start], positions[end] + 1)
            for pattern, start, end in self.scan(chars)
        ]
