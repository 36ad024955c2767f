"""Exceptions raised by the seedoku core."""


class SeedokuError(Exception):
    """Base class for all seedoku errors."""


class ShapeMismatchError(SeedokuError, ValueError):
    """Raised when grid values are not a 9x9 matrix."""


class InvalidComplexityError(SeedokuError, ValueError):
    """Raised for a complexity outside the known set."""


class GenerationExhaustedError(SeedokuError, RuntimeError):
    """
    Raised when the generator gives up before completing a grid.
    
    Attributes:
        seed: The seed that was being generated.
        attempts: Number of whole-grid attempts made before giving up.
    """
    
    def __init__(self, seed: int, attempts: int, reason: str = "attempt limit reached"):
        super().__init__(
            f"Could not generate a grid for seed {seed} after {attempts} attempts ({reason})"
        )
        self.seed = seed
        self.attempts = attempts
