from __future__ import annotations

import logging
import random
from collections import deque
from typing import Deque, Dict, FrozenSet, Iterable, Optional, Sequence, Tuple

from aoeu.core.errors import SamplingExhausted

logger = logging.getLogger(__name__)


class WordSampler:
    """Draws practice words whose letters all belong to a lesson alphabet.

    The corpus is filtered once per alphabet and the eligible words are
    cached, so each draw is a single uniform choice.
    """

    def __init__(self, corpus: Sequence[str], rng: Optional[random.Random] = None) -> None:
        self._corpus = tuple(corpus)
        self._rng = rng or random.Random()
        self._eligible: Dict[FrozenSet[str], Tuple[str, ...]] = {}

    @property
    def corpus_size(self) -> int:
        return len(self._corpus)

    def eligible(self, allowed: Iterable[str]) -> Tuple[str, ...]:
        """Return the corpus words made only of ``allowed`` characters."""
        alphabet = frozenset(allowed)
        cached = self._eligible.get(alphabet)
        if cached is None:
            cached = tuple(word for word in self._corpus if word and set(word) <= alphabet)
            self._eligible[alphabet] = cached
            logger.debug(
                "%d of %d corpus words fit alphabet %r",
                len(cached),
                self.corpus_size,
                "".join(sorted(alphabet)),
            )
        return cached

    def sample(self, allowed: Iterable[str], count: int) -> Deque[str]:
        """Draw ``count`` words with replacement from the eligible words."""
        if count < 0:
            raise ValueError("count must be >= 0")
        alphabet = frozenset(allowed)
        if count == 0:
            return deque()
        candidates = self.eligible(alphabet)
        if not candidates:
            raise SamplingExhausted(alphabet, count)
        return deque(self._rng.choice(candidates) for _ in range(count))
