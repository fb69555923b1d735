"""xoroshiro128+ command-line runner.

Prints generator output for a seed, optionally reduced to [MIN, MAX),
advanced by jumps, or split across parallel jumped streams.
"""

import argparse
import logging
import sys

from xoroshiro import config
from xoroshiro.metrics import RunMetrics
from xoroshiro import Xoroshiro128Plus, RangeError, MASK64, streams

logger = logging.getLogger(__name__)


def u64_arg(text: str) -> int:
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if not 0 <= value <= MASK64:
        raise argparse.ArgumentTypeError(f"{text} is outside the unsigned 64-bit range")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Draw values from a xoroshiro128+ generator.")
    ap.add_argument("--seed", type=u64_arg, default=config.DEFAULT_SEED,
                    help="64-bit seed; 0 seeds from OS entropy (default: %(default)s)")
    ap.add_argument("--count", type=int, default=config.DEFAULT_COUNT,
                    help="values to draw per stream (default: %(default)s)")
    ap.add_argument("--range", nargs=2, type=u64_arg, metavar=("MIN", "MAX"),
                    help="reduce each value to [MIN, MAX)")
    ap.add_argument("--jumps", type=int, default=0,
                    help="jump the generator this many times before drawing")
    ap.add_argument("--streams", type=int, default=1,
                    help="number of non-overlapping jumped streams")
    ap.add_argument("--strict", action="store_true", default=config.STRICT_RANGE,
                    help="fail instead of returning 0 when MIN > MAX")
    ap.add_argument("--hex", action="store_true", help="print values as hex")
    return ap


def format_value(value, as_hex: bool = False) -> str:
    if as_hex:
        return f"0x{int(value):016X}"
    return str(int(value))


def draw(gen: Xoroshiro128Plus, count: int, bounds=None, metrics: RunMetrics | None = None):
    """Draw `count` values, reduced to [MIN, MAX) when bounds are given."""
    values = []
    for _ in range(count):
        if bounds is None:
            values.append(gen.next())
        else:
            values.append(gen.range(*bounds))
        if metrics is not None:
            metrics.draws += 1
    return values


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))

    if args.count < 0 or args.jumps < 0 or args.streams < 1:
        logger.error("--count and --jumps must be >= 0, --streams must be >= 1")
        return 2

    metrics = RunMetrics()
    gens = streams(args.seed, args.streams, strict=args.strict)
    metrics.start()
    try:
        for k, gen in enumerate(gens):
            for _ in range(args.jumps):
                gen.jump()
                metrics.jumps += 1
            values = draw(gen, args.count, args.range, metrics)
            if len(gens) > 1:
                print(f"# stream {k}")
            for v in values:
                print(format_value(v, args.hex))
    except RangeError as e:
        logger.error("%s", e)
        return 2
    finally:
        metrics.stop()

    logger.debug("Drew %d values (%d jumps) in %.3fs, %.0f/s",
                 metrics.draws, metrics.jumps, metrics.elapsed, metrics.rate)
    return 0


if __name__ == "__main__":
    sys.exit(main())
