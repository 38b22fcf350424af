"""Replay a scenario of pool operations from a JSON file.

Usage:
    lp-pool replay scenario.json
    lp-pool replay scenario.json --config value-weighted --strict -v

Scenario format:
    {
      "pool": {"price": "1.5", "liquidityTarget": "90", "minFee": "0.1", "maxFee": "9"},
      "operations": [
        {"op": "add_liquidity", "amount": "100"},
        {"op": "swap", "amount": "6"}
      ]
    }

Prints every operation result and the final pool state as JSON on stdout.
Logs go to stderr.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog
from pydantic import ValidationError

from lp_pool.config import DEFAULT_POOL_CONFIG, VALUE_WEIGHTED_POOL_CONFIG, PoolConfig
from lp_pool.errors import LpPoolError
from lp_pool.models import OperationKind, OperationResult, Scenario
from lp_pool.pool import Pool

logger = structlog.get_logger()

CONFIGS = {
    "default": lambda: DEFAULT_POOL_CONFIG,
    "value-weighted": lambda: VALUE_WEIGHTED_POOL_CONFIG,
    "env": PoolConfig.from_env,
}


def replay_scenario(
    scenario: Scenario,
    config: PoolConfig | None = None,
    *,
    strict: bool = False,
) -> tuple[Pool, list[OperationResult]]:
    """Initialize a pool and apply every scenario operation in order.

    Rejected operations are recorded and replay continues, unless strict is
    set, in which case replay stops after the first rejection.

    Raises:
        InvalidFee: If the pool parameters are invalid
    """
    params = scenario.pool
    pool = Pool.initialize(
        price=params.price,
        liquidity_target=params.liquidity_target,
        min_fee=params.min_fee,
        max_fee=params.max_fee,
        config=config,
    )

    results: list[OperationResult] = []
    for index, operation in enumerate(scenario.operations):
        kind = OperationKind(operation.op)
        try:
            if kind is OperationKind.ADD_LIQUIDITY:
                output = [pool.add_liquidity(operation.amount)]
            elif kind is OperationKind.REMOVE_LIQUIDITY:
                output = list(pool.remove_liquidity(operation.amount))
            else:
                output = [pool.swap(operation.amount)]
        except LpPoolError as err:
            results.append(
                OperationResult(
                    index=index,
                    op=kind,
                    amount=operation.amount,
                    error=type(err).__name__,
                    error_detail=str(err),
                )
            )
            if strict:
                break
            continue
        results.append(
            OperationResult(index=index, op=kind, amount=operation.amount, output=output)
        )

    return pool, results


def load_scenario(path: Path) -> Scenario:
    """Load and validate a scenario file."""
    with open(path) as f:
        data = json.load(f)
    return Scenario.model_validate(data)


def _configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the lp-pool command."""
    parser = argparse.ArgumentParser(prog="lp-pool", description="Single-asset LP pool tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    replay = subparsers.add_parser("replay", help="Replay a JSON scenario against a fresh pool")
    replay.add_argument("scenario", type=Path, help="Path to the scenario JSON file")
    replay.add_argument(
        "--config",
        choices=list(CONFIGS.keys()),
        default="default",
        help="Pool behavior preset, or 'env' to read LP_POOL_* variables (default: default)",
    )
    replay.add_argument(
        "--strict",
        action="store_true",
        help="Stop at the first rejected operation and exit with status 1",
    )
    replay.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        scenario = load_scenario(args.scenario)
    except (OSError, json.JSONDecodeError, ValidationError) as err:
        logger.error("scenario_load_failed", path=str(args.scenario), error=str(err))
        print(f"Error: cannot load scenario {args.scenario}: {err}", file=sys.stderr)
        return 2

    try:
        pool, results = replay_scenario(scenario, CONFIGS[args.config](), strict=args.strict)
    except LpPoolError as err:
        logger.error("pool_initialization_failed", error=str(err))
        print(f"Error: {type(err).__name__}: {err}", file=sys.stderr)
        return 1

    report = {
        "results": [result.model_dump(mode="json", exclude_none=True) for result in results],
        "pool": pool.snapshot().model_dump(mode="json"),
    }
    print(json.dumps(report, indent=2))

    if args.strict and any(result.is_error for result in results):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
