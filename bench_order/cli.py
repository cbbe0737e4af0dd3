#!/usr/bin/env python3
"""
Bench Order CLI - print the run order or report order of benchmark cases.

Usage:
    bench-order cases.json
    bench-order cases.json --mode summary --summary-order fastest_to_slowest
    bench-order cases.json --mode summary --group-by by_category --config order.json
    bench-order cases.json --dry-run
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from bench_order.config import (
    BenchOrderConfig,
    LOG_LEVELS,
    get_default_config,
    merge_configs,
)
from bench_order.ordering import grouping
from bench_order.ordering.order_provider import DefaultOrderProvider
from bench_order.ordering.policies import LogicalGroupRule, MethodOrderPolicy, SummaryOrderPolicy
from bench_order.reports.summary import Summary
from bench_order.running.case import Case
from bench_order.running.loader import load_cases


def setup_logging(level: str = "info") -> None:
    """Configure logging for bench_order."""
    log_levels = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }
    logging.basicConfig(
        level=log_levels.get(level.lower(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Order and group benchmark cases for execution or reporting",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s cases.json
  %(prog)s cases.json --mode summary --summary-order fastest_to_slowest
  %(prog)s cases.json --mode summary --group-by by_category
        """,
    )

    parser.add_argument(
        "cases_file",
        help="Path to JSON file with benchmark cases and statistics",
    )

    parser.add_argument(
        "--config", "-c",
        help="Path to bench_order configuration file",
    )

    parser.add_argument(
        "--mode",
        choices=["execution", "summary"],
        default="execution",
        help="Print execution order or grouped summary order",
    )

    parser.add_argument(
        "--summary-order",
        choices=[policy.value for policy in SummaryOrderPolicy],
        help="Ordering of cases inside each logical group",
    )

    parser.add_argument(
        "--method-order",
        choices=[policy.value for policy in MethodOrderPolicy],
        help="Ordering of benchmark methods",
    )

    parser.add_argument(
        "--group-by",
        action="append",
        choices=[rule.value for rule in LogicalGroupRule],
        help="Logical grouping rule (repeatable)",
    )

    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        help="Logging level (overrides the config file)",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show configuration and exit without ordering",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> BenchOrderConfig:
    """Build configuration from arguments."""
    config = get_default_config()

    # Load and merge config file if provided
    if args.config:
        config_path = Path(args.config)
        if config_path.exists():
            with open(config_path) as f:
                override_data = json.load(f)
            config = merge_configs(config, override_data.get("bench_order", override_data))
        else:
            raise FileNotFoundError(f"Config file not found: {args.config}")

    # Apply command-line overrides
    overrides = {}

    if args.log_level:
        overrides["execution"] = {"log_level": args.log_level}

    if args.summary_order:
        overrides.setdefault("ordering", {})["summary_order_policy"] = args.summary_order

    if args.method_order:
        overrides.setdefault("ordering", {})["method_order_policy"] = args.method_order

    if args.group_by:
        rules = config.grouping.logical_group_rules + args.group_by
        overrides["grouping"] = {"logical_group_rules": rules}

    return merge_configs(config, overrides)


def format_execution_order(provider: DefaultOrderProvider, cases: List[Case]) -> List[str]:
    return [case.display_info for case in provider.get_execution_order(cases)]


def format_summary_order(
    provider: DefaultOrderProvider,
    cases: List[Case],
    summary: Summary,
) -> List[str]:
    """One line per case, with a blank line between logical groups."""
    group_keys = {
        case: key
        for key, group in grouping.group_cases(summary.config, cases)
        for case in group
    }
    lines = []
    previous_key = None
    for case in provider.get_summary_order(cases, summary):
        key = group_keys[case]
        if provider.separate_logical_groups and previous_key is not None and key != previous_key:
            lines.append("")
        previous_key = key

        line = case.display_info
        if case in summary:
            line += f"  mean={summary[case].mean:g}"
        highlight = provider.get_highlight_group_key(case)
        if highlight:
            line += f"  [{highlight}]"
        lines.append(line)
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = build_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    setup_logging(config.execution.log_level)
    logger = logging.getLogger("bench_order")

    # Show configuration in dry-run mode
    if args.dry_run:
        print("Bench Order Configuration:")
        print("=" * 50)
        print(json.dumps(config.to_dict(), indent=2))
        return 0

    try:
        cases, statistics = load_cases(args.cases_file)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    provider = DefaultOrderProvider.from_config(config)
    logger.info(
        f"Ordering {len(cases)} cases (mode={args.mode}, "
        f"summary_order={provider.summary_order_policy.value}, "
        f"method_order={provider.method_order_policy.value})"
    )

    try:
        if args.mode == "summary":
            lines = format_summary_order(provider, cases, Summary(config, statistics))
        else:
            lines = format_execution_order(provider, cases)
    except Exception as e:
        logger.exception(f"Error while ordering cases: {e}")
        return 1

    for line in lines:
        print(line)
    return 0


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
