"""State record and error types for the MRG32k3a generator."""

from dataclasses import dataclass, astuple, replace
from typing import Tuple

CANONICAL_SEED = 12345


class InvalidSeed(ValueError):
    """Raised when a custom seed cannot drive the recurrence."""


@dataclass
class GeneratorState:
    # register A feeds the m1 component, register B the m2 component (older -> newer)
    a0: int = CANONICAL_SEED
    a1: int = CANONICAL_SEED
    a2: int = CANONICAL_SEED
    b0: int = CANONICAL_SEED
    b1: int = CANONICAL_SEED
    b2: int = CANONICAL_SEED

    def as_tuple(self) -> Tuple[int, ...]:
        return astuple(self)

    def copy(self) -> "GeneratorState":
        return replace(self)
