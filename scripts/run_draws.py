"""Command line harness for the MRG32k3a reference generator."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "draw_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from mrg32k3a import InvalidSeed, StreamConfig, run_stream

logger = logging.getLogger(__name__)


def _parse_seed(value: str) -> tuple[int, ...]:
    """Parse a CLI `a0,a1,a2,b0,b1,b2` seed; each word accepts decimal or 0x hex."""

    parts = [part.strip() for part in value.split(",") if part.strip()]
    if len(parts) != 6:
        raise argparse.ArgumentTypeError(
            f"Seed needs exactly 6 comma-separated words, received '{value}'."
        )

    try:
        return tuple(int(part, 0) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Seed words must be integers.") from exc


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("Expected a non-negative integer. Received: %s" % value)
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Emit a deterministic MRG32k3a output stream")
    parser.add_argument("--count", type=_non_negative, default=10, help="Number of outputs to record")
    parser.add_argument(
        "--skip",
        type=_non_negative,
        default=0,
        help="Number of outputs to discard before recording",
    )
    parser.add_argument(
        "--seed",
        metavar="a0,a1,a2,b0,b1,b2",
        type=_parse_seed,
        default=None,
        help="Custom six-word seed (defaults to the canonical 12345 seed)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log run details at DEBUG level")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "draw_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cfg = StreamConfig(count=args.count, seed=args.seed, skip=args.skip)
    try:
        result = run_stream(cfg)
    except InvalidSeed as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logger.info("Wrote report to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
