"""Command-line interface for the demonstration scenarios.

Provides the `funlist-demo` command, which loads a scenario file and prints
the result of each combinator call.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from funlist.demo import (
    DEFAULT_SCENARIOS_PATH,
    ScenarioSuite,
    format_result,
    load_scenarios,
    run_scenario,
)


def cmd_list(suite: ScenarioSuite) -> int:
    """List scenario names."""
    for scenario in suite.scenarios:
        status = "" if scenario.enabled else " (disabled)"
        print(f"{scenario.name}{status}")
    return 0


def cmd_run(suite: ScenarioSuite, only: list[str] | None) -> int:
    """Run scenarios and print their results."""
    if only:
        by_name = {scenario.name: scenario for scenario in suite.scenarios}
        missing = [name for name in only if name not in by_name]
        if missing:
            print(f"Error: unknown scenario(s): {', '.join(missing)}")
            return 1
        selected = [by_name[name] for name in only]
    else:
        selected = suite.enabled()

    for scenario in selected:
        try:
            result = run_scenario(scenario)
        except TypeError as e:
            print(f"Error: scenario '{scenario.name}' failed: {e}")
            return 1
        print(f"{scenario.name}: {format_result(result)}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="funlist-demo",
        description="Print sample invocations of the funlist combinators",
    )
    parser.add_argument(
        "--scenarios",
        help=f"Path to a scenarios YAML file (default: {DEFAULT_SCENARIOS_PATH.name})",
    )
    parser.add_argument(
        "--only",
        nargs="+",
        metavar="NAME",
        help="Run only the named scenarios (disabled ones included)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List scenario names without running them",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    scenarios_path = Path(args.scenarios) if args.scenarios else DEFAULT_SCENARIOS_PATH
    if not scenarios_path.exists():
        print(f"Error: scenario file not found: {scenarios_path}")
        return 1

    try:
        suite = load_scenarios(scenarios_path)
    except (OSError, yaml.YAMLError, ValueError) as e:
        print(f"Error loading scenarios: {e}")
        return 1

    if args.list:
        return cmd_list(suite)
    return cmd_run(suite, args.only)


if __name__ == "__main__":
    sys.exit(main())
