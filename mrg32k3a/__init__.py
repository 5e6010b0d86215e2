"""Public package surface for the MRG32k3a reference generator."""

from .models import CANONICAL_SEED, GeneratorState, InvalidSeed
from .prng import MRG32k3a, draw, init, seeded
from .stream import StreamConfig, run_stream

__all__ = [
    "CANONICAL_SEED",
    "GeneratorState",
    "InvalidSeed",
    "MRG32k3a",
    "StreamConfig",
    "draw",
    "init",
    "run_stream",
    "seeded",
]
