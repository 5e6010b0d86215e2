# MRG32k3a combined multiple recursive generator (L'Ecuyer), integer output
# Output is the raw p1 - p2 difference wrapped into [0, m1], not the normalised float of the paper
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from .models import GeneratorState, InvalidSeed

M1 = 4294967087
M2 = 4294944443
A12 = 1403580
A13N = 810728
A21 = 527612
A23N = 1370589


def _reduce(p: int, m: int) -> int:
    # quotient truncates toward zero, then one corrective add; not floor modulo
    k = abs(p) // m
    if p < 0:
        k = -k
    p -= k * m
    if p < 0:
        p += m
    return p


def init() -> GeneratorState:
    """Fresh generator state at the canonical seed (all six registers 12345)."""
    return GeneratorState()


def draw(state: GeneratorState) -> int:
    """Advance ``state`` by one step in place and return the next output in [0, M1].

    ``M1`` itself comes back only when the two freshly reduced words are equal,
    since that tie takes the ``p1 - p2 + M1`` branch.
    """
    p1 = _reduce(A12 * state.a1 - A13N * state.a0, M1)
    state.a0, state.a1, state.a2 = state.a1, state.a2, p1

    p2 = _reduce(A21 * state.b2 - A23N * state.b0, M2)
    state.b0, state.b1, state.b2 = state.b1, state.b2, p2

    if p1 <= p2:
        return p1 - p2 + M1
    return p1 - p2


def seeded(seed: Iterable[int]) -> GeneratorState:
    """Build a state from ``(a0, a1, a2, b0, b1, b2)``, rejecting unusable seeds.

    Register A words must lie in [0, M1) and register B words in [0, M2).
    A register that is zero in all three positions is a fixed point of its
    recurrence and is rejected as well. Nothing is clamped.
    """

    words = tuple(seed)
    if len(words) != 6:
        raise InvalidSeed(f"Seed needs exactly 6 words, received {len(words)}.")
    for index, word in enumerate(words):
        if isinstance(word, bool) or not isinstance(word, int):
            raise InvalidSeed(f"Seed word {index} must be an integer, received {word!r}.")

    reg_a, reg_b = words[:3], words[3:]
    if any(not 0 <= word < M1 for word in reg_a):
        raise InvalidSeed(f"Register A words must lie in [0, {M1}), received {reg_a}.")
    if any(not 0 <= word < M2 for word in reg_b):
        raise InvalidSeed(f"Register B words must lie in [0, {M2}), received {reg_b}.")
    if not any(reg_a):
        raise InvalidSeed("Register A cannot be all zero.")
    if not any(reg_b):
        raise InvalidSeed("Register B cannot be all zero.")

    return GeneratorState(*words)


@dataclass
class MRG32k3a:
    state: GeneratorState = field(default_factory=init)

    @classmethod
    def from_seed(cls, seed: Iterable[int]) -> "MRG32k3a":
        return cls(seeded(seed))

    def next_u32(self) -> int:
        return draw(self.state)

    def take(self, n: int) -> List[int]:
        if n < 0:
            raise ValueError("Cannot take a negative number of draws.")
        return [draw(self.state) for _ in range(n)]

    def skip(self, n: int) -> None:
        if n < 0:
            raise ValueError("Cannot skip a negative number of draws.")
        for _ in range(n):
            draw(self.state)

    def snapshot(self) -> Tuple[int, ...]:
        return self.state.as_tuple()

    def __iter__(self) -> Iterator[int]:
        while True:
            yield draw(self.state)
