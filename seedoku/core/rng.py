"""
Seeded pseudo-random source shared by the generator and the revealer.

Grids must be reproducible from a seed across processes, platforms and
library versions, so instead of ``random`` or ``numpy.random`` this uses a
fixed, fully documented recurrence: the 48-bit linear congruential generator
described for ``java.util.Random``.

    seeding:  state = (seed XOR 0x5DEECE66D) mod 2**48
    step:     state = (state * 0x5DEECE66D + 0xB) mod 2**48
    output:   next_bits(k) = state >> (48 - k)

Bounded integers are drawn from 31-bit outputs with rejection sampling, and
shuffles are Fisher-Yates from the last index down.
"""

from __future__ import annotations
from typing import Iterable, List, MutableSequence, TypeVar, Union

T = TypeVar("T")

MULTIPLIER = 0x5DEECE66D
INCREMENT = 0xB
STATE_BITS = 48
STATE_MASK = (1 << STATE_BITS) - 1

_DRAW_BITS = 31
_DRAW_RANGE = 1 << _DRAW_BITS


class SeededRandom:
    """Deterministic 48-bit LCG random source."""
    
    def __init__(self, seed: int):
        """
        Initialize the generator.
        
        Args:
            seed: Any integer. Negative and arbitrarily large values are
                  accepted; only the low 48 bits take part in seeding.
        """
        self._state = (int(seed) ^ MULTIPLIER) & STATE_MASK
    
    def next_bits(self, bits: int) -> int:
        """Advance the state and return its top ``bits`` bits."""
        if bits < 1 or bits > STATE_BITS:
            raise ValueError(f"bits must be 1-{STATE_BITS}, got {bits}")
        self._state = (self._state * MULTIPLIER + INCREMENT) & STATE_MASK
        return self._state >> (STATE_BITS - bits)
    
    def next_below(self, bound: int) -> int:
        """Return an unbiased integer in [0, bound)."""
        if bound < 1 or bound > _DRAW_RANGE:
            raise ValueError(f"bound must be 1-{_DRAW_RANGE}, got {bound}")
        limit = _DRAW_RANGE - (_DRAW_RANGE % bound)
        while True:
            r = self.next_bits(_DRAW_BITS)
            if r < limit:
                return r % bound
    
    def randrange(self, start: int, stop: int) -> int:
        """Return an integer in the half-open range [start, stop)."""
        if start >= stop:
            raise ValueError(f"Empty range [{start}, {stop})")
        return start + self.next_below(stop - start)
    
    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle a sequence in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_below(i + 1)
            items[i], items[j] = items[j], items[i]
    
    def permutation(self, values: Union[int, Iterable[T]]) -> List:
        """
        Return a shuffled list.
        
        Args:
            values: An int ``n`` for a permutation of ``range(n)``, or any
                    iterable whose items are shuffled into a new list.
        """
        items = list(range(values)) if isinstance(values, int) else list(values)
        self.shuffle(items)
        return items
