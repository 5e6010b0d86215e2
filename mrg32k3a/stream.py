"""Deterministic draw runs that produce a JSON-ready report."""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Tuple

from .prng import MRG32k3a

logger = logging.getLogger(__name__)


@dataclass
class StreamConfig:
    """Configuration for a single draw run."""

    count: int = 10
    seed: Optional[Tuple[int, ...]] = None  # None -> canonical 12345 seed
    skip: int = 0


def run_stream(cfg: StreamConfig) -> Dict[str, Any]:
    """Draw ``cfg.count`` outputs after discarding ``cfg.skip``."""

    if cfg.count < 0:
        raise ValueError("count must be non-negative.")
    if cfg.skip < 0:
        raise ValueError("skip must be non-negative.")

    rng = MRG32k3a() if cfg.seed is None else MRG32k3a.from_seed(cfg.seed)
    logger.debug("Starting stream from state %s (skip=%d, count=%d)", rng.snapshot(), cfg.skip, cfg.count)

    rng.skip(cfg.skip)
    outputs: List[int] = rng.take(cfg.count)

    logger.debug("Stream finished at state %s", rng.snapshot())
    return {
        "config": asdict(cfg),
        "outputs": outputs,
        "final": {
            "state": list(rng.snapshot()),
            "draws": cfg.skip + cfg.count,
        },
    }


if __name__ == "__main__":
    import json

    print(json.dumps(run_stream(StreamConfig()), indent=2))
