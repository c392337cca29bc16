"""Command-line interface for primality."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from primality.checker import METHODS
from primality.config import CheckConfig

logger = logging.getLogger("primality")


def setup_logging(verbose: bool = False, log_file: str | None = None) -> logging.Logger:
    """Set up the package logger for console output and an optional file."""
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger


def load_config(args: argparse.Namespace) -> CheckConfig:
    """Build the run configuration from --config plus explicit flags."""
    config = CheckConfig.load(args.config) if args.config else CheckConfig()
    return config.merged(
        method=getattr(args, "method", None),
        rounds=getattr(args, "rounds", None),
        seed=args.seed,
        sweep_start=getattr(args, "start", None),
        sweep_stop=getattr(args, "stop", None),
        trials=getattr(args, "trials", None),
        alpha=getattr(args, "alpha", None),
    )


def cmd_check(args: argparse.Namespace) -> int:
    """Test each number with the configured method."""
    from primality.checker import check

    config = load_config(args)
    rng = config.rng()

    for n in args.numbers:
        result = check(n, method=config.method, rounds=config.rounds, rng=rng)
        logger.info(f"{n}: {result}")

    return 0


def cmd_sweep(args: argparse.Namespace) -> int:
    """Cross-validate every test against the small-prime table."""
    from primality.evaluation.agreement import cross_validate

    config = load_config(args)
    logger.info(
        f"Cross-validating odd n in [{config.sweep_start}, {config.sweep_stop}) "
        f"with {config.rounds} rounds"
    )

    report = cross_validate(
        start=config.sweep_start,
        stop=config.sweep_stop,
        rounds=config.rounds,
        rng=config.rng(),
        progress=args.progress,
    )

    logger.info(f"Checked {report.checked:,} values, {report.primes:,} prime")
    for d in report.disagreements[:20]:
        logger.info(f"  n={d.n}: {d.verdicts}")

    if args.output:
        output = Path(args.output)
        with open(output, "w", encoding="utf-8") as f:
            json.dump(report.to_dict(), f, indent=2)
        logger.info(f"Saved to {output}")

    if not report.ok:
        logger.info(f"{len(report.disagreements)} disagreements")
        return 1

    logger.info("All tests agree")
    return 0


def cmd_soundness(args: argparse.Namespace) -> int:
    """Estimate the per-round detection rate of a probabilistic test."""
    from primality.evaluation.soundness import estimate_error_rate

    config = load_config(args)
    result = estimate_error_rate(
        args.n,
        test=args.test,
        trials=config.trials,
        rng=config.rng(),
        alpha=config.alpha,
        progress=args.progress,
    )

    logger.info(f"{result.test} on n={result.n}: {result.detections}/{result.trials} detected")
    logger.info(f"  Detection rate: {result.detection_rate:.4f} (bound {result.bound})")
    logger.info(f"  p-value: {result.p_value:.4g}")
    logger.info(f"  Consistent with bound: {result.consistent}")

    return 0 if result.consistent else 1


def cmd_table(args: argparse.Namespace) -> int:
    """Query the small-prime lookup table."""
    from primality.core.sieve import query_small_prime

    for n in args.numbers:
        logger.info(f"{n}: {query_small_prime(n)}")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Primality testing toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug output")
    parser.add_argument("--log-file", default=None, help="Also log to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Test numbers for primality")
    check_parser.add_argument("numbers", type=int, nargs="+", help="Numbers to test")
    check_parser.add_argument("--method", choices=METHODS, default=None, help="Test to use")
    check_parser.add_argument("--rounds", "-k", type=int, default=None, help="Probabilistic rounds")

    sweep_parser = subparsers.add_parser("sweep", help="Cross-validate all tests")
    sweep_parser.add_argument("--start", type=int, default=None, help="First value")
    sweep_parser.add_argument("--stop", type=int, default=None, help="End value (exclusive)")
    sweep_parser.add_argument("--rounds", "-k", type=int, default=None, help="Probabilistic rounds")
    sweep_parser.add_argument("--output", "-o", default=None, help="Write report as JSON")
    sweep_parser.add_argument("--progress", action="store_true", help="Show progress bar")

    sound_parser = subparsers.add_parser("soundness", help="Estimate per-round detection rate")
    sound_parser.add_argument("n", type=int, help="Odd composite to test")
    sound_parser.add_argument("--test", choices=["miller-rabin", "solovay-strassen"],
                              default="solovay-strassen", help="Probabilistic test")
    sound_parser.add_argument("--trials", type=int, default=None, help="Number of trials")
    sound_parser.add_argument("--alpha", type=float, default=None, help="Significance level")
    sound_parser.add_argument("--progress", action="store_true", help="Show progress bar")

    table_parser = subparsers.add_parser("table", help="Query the small-prime table")
    table_parser.add_argument("numbers", type=int, nargs="+", help="Numbers in [0, 65535]")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logging(args.verbose, args.log_file)

    commands = {
        "check": cmd_check,
        "sweep": cmd_sweep,
        "soundness": cmd_soundness,
        "table": cmd_table,
    }

    try:
        return commands[args.command](args)
    except (ValueError, TypeError) as e:
        logger.error(f"Error: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
