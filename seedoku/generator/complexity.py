"""Difficulty tiers and the reveal-count policy table."""

from __future__ import annotations
from enum import Enum
from typing import Dict, Tuple, Union

from ..core.errors import InvalidComplexityError


class Complexity(Enum):
    """Difficulty levels for revealed puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    
    @property
    def reveal_range(self) -> Tuple[int, int]:
        """Half-open range [low, high) of revealed cells for this level."""
        return REVEAL_RANGES[self]
    
    @classmethod
    def parse(cls, value: Union[Complexity, str]) -> Complexity:
        """
        Resolve a complexity from an enum member or a name such as "hard".
        
        Matching is case-insensitive on both the member name and its value.
        
        Raises:
            InvalidComplexityError: If the value names no known level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key == member.value:
                    return member
        raise InvalidComplexityError(
            f"Unknown complexity {value!r}, expected one of {[c.value for c in cls]}"
        )


# Revealed-cell counts per level; upper bounds are exclusive.
REVEAL_RANGES: Dict[Complexity, Tuple[int, int]] = {
    Complexity.EASY: (36, 50),
    Complexity.MEDIUM: (27, 36),
    Complexity.HARD: (19, 27),
}
