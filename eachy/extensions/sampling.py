from __future__ import annotations
import logging
import random
import typing
from ..types import *
from ..config import get_config
from ..errors import ArgumentError, SampleIndexError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)

RandomState = Union[int, random.Random, None]


def _resolve_random(random_state: RandomState) -> random.Random:
    """a generator from an explicit Random, an int seed, or the configured default seed"""
    if isinstance(random_state, random.Random):
        return random_state
    if random_state is None:
        random_state = get_config().random_seed
    return random.Random(random_state)


class _SamplingOperations(Generic[T]):
    def sample(self: 'Enumerable[T]', n: Optional[int] = None,
               random_state: RandomState = None) -> Union[T, List[T]]:
        """
        random sampling without replacement, in a single pass.

        with no n: one element, every element equally likely; SampleIndexError
        on an empty source. with n: a list of min(n, size) distinct positions,
        in random order.
        """
        if n is None:
            return self._sample_one(_resolve_random(random_state))
        if n < 0: raise ArgumentError("can't sample negative number of elements")
        if n == 0: return []
        return self._sample_many(n, _resolve_random(random_state))

    def _sample_one(self: 'Enumerable[T]', rng: random.Random) -> T:
        kept = MISSING
        seen = 0

        def visit(item):
            nonlocal kept, seen
            # the i-th element (1-based) replaces the kept one with probability 1/i
            if kept is MISSING or rng.randrange(seen + 1) == 0:
                kept = item
            seen += 1

        self.each(visit)
        if kept is MISSING: raise SampleIndexError()
        return kept

    def _sample_many(self: 'Enumerable[T]', n: int, rng: random.Random) -> List[T]:
        reservoir: List[T] = []
        seen = 0

        def visit(item):
            nonlocal seen
            if seen < n:
                reservoir.append(item)
            else:
                j = rng.randrange(seen + 1)
                if j < n: reservoir[j] = item
            seen += 1

        self.each(visit)
        logger.debug(f"reservoir kept {len(reservoir)} of {seen} elements")
        # the reservoir's slot order is not random by itself
        rng.shuffle(reservoir)
        return reservoir
