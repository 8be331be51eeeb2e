"""Declarative demonstration scenarios.

A scenario names one combinator, the lists to build for it and any extra
arguments, and is loaded from YAML. The packaged ``scenarios.yaml`` replays
the classic examples: flat_map, get, take/drop, contains, head and zip_with.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from funlist import ops
from funlist.option import Absent, Some
from funlist.types import is_cons_list

DEFAULT_SCENARIOS_PATH = Path(__file__).parent / "scenarios.yaml"

# Combinators a scenario may call, by name
OPERATIONS: dict[str, Callable[..., Any]] = {
    name: getattr(ops, name) for name in ops.__all__ if name not in {"cons", "cons_list"}
}


def _show_and_shift(x: int) -> Any:
    return ops.cons_list(str(x), str(x + 2))


# Pure functions a scenario may pass to a combinator, by name
FUNCTIONS: dict[str, Callable[..., Any]] = {
    "show_and_shift": _show_and_shift,
    "pair": lambda a, b: (a, b),
    "add": lambda a, b: a + b,
    "concat_str": lambda a, b: f"{a}{b}",
    "nest": lambda a, b: f"({a} {b})",
    "double": lambda x: x * 2,
    "increment": lambda x: x + 1,
    "is_even": lambda x: x % 2 == 0,
    "to_str": str,
}


@dataclass
class Scenario:
    """One combinator invocation.

    Attributes:
        name: Label printed next to the result.
        operation: Name of a function in ``funlist.ops``.
        lists: Element sequences, each turned into a ConsList.
        seed: Fold seed, passed after the lists.
        has_seed: Whether a seed was given; a seed may be null.
        arg: Plain argument such as an index or count.
        has_arg: Whether an arg was given.
        function: Key into ``FUNCTIONS``, passed last (optional).
        enabled: Whether the scenario runs.
    """

    name: str
    operation: str
    lists: list[list[Any]] = field(default_factory=list)
    seed: Any = None
    has_seed: bool = False
    arg: Any = None
    has_arg: bool = False
    function: str | None = None
    enabled: bool = True


@dataclass
class ScenarioSuite:
    """Scenarios loaded from one YAML file."""

    name: str
    scenarios: list[Scenario]
    source: Path | None = None

    def enabled(self) -> list[Scenario]:
        return [s for s in self.scenarios if s.enabled]


def parse_scenarios(data: Any, source: Path | None = None) -> ScenarioSuite:
    """Build a ScenarioSuite from already-parsed YAML data.

    Raises:
        ValueError: If the document is malformed or names an unknown
            operation or function.
    """
    if not isinstance(data, dict) or "scenarios" not in data:
        msg = "Scenario file must be a mapping with a 'scenarios' key"
        raise ValueError(msg)

    scenarios = []
    for index, entry in enumerate(data["scenarios"] or []):
        if not isinstance(entry, dict) or "operation" not in entry:
            msg = f"Scenario #{index} has no 'operation'"
            raise ValueError(msg)

        operation = entry["operation"]
        if operation not in OPERATIONS:
            msg = f"Scenario #{index}: unknown operation '{operation}'"
            raise ValueError(msg)

        function = entry.get("function")
        if function is not None and function not in FUNCTIONS:
            msg = f"Scenario #{index}: unknown function '{function}'"
            raise ValueError(msg)

        lists = entry.get("lists") or []
        if not isinstance(lists, list) or not all(
            items is None or isinstance(items, list) for items in lists
        ):
            msg = f"Scenario #{index}: 'lists' must be a list of lists"
            raise ValueError(msg)

        scenarios.append(
            Scenario(
                name=entry.get("name", operation),
                operation=operation,
                lists=[list(items or []) for items in lists],
                seed=entry.get("seed"),
                has_seed="seed" in entry,
                arg=entry.get("arg"),
                has_arg="arg" in entry,
                function=function,
                enabled=entry.get("enabled", True),
            )
        )

    return ScenarioSuite(
        name=data.get("name", "scenarios"), scenarios=scenarios, source=source
    )


def load_scenarios(path: Path | None = None) -> ScenarioSuite:
    """Load a scenario suite from YAML.

    Args:
        path: Path to a scenarios file. Defaults to the packaged one.

    Returns:
        The parsed ScenarioSuite.
    """
    path = Path(path) if path is not None else DEFAULT_SCENARIOS_PATH
    with path.open() as f:
        data = yaml.safe_load(f)
    return parse_scenarios(data, source=path)


def run_scenario(scenario: Scenario) -> Any:
    """Call the scenario's combinator and return its result."""
    args: list[Any] = [ops.from_sequence(items) for items in scenario.lists]
    if scenario.has_seed:
        args.append(scenario.seed)
    if scenario.has_arg:
        args.append(scenario.arg)
    if scenario.function is not None:
        args.append(FUNCTIONS[scenario.function])
    return OPERATIONS[scenario.operation](*args)


def format_result(value: Any) -> str:
    """Render a result for display."""
    if is_cons_list(value) or isinstance(value, (Some, Absent)):
        return repr(value)
    if isinstance(value, list):
        return f"[{', '.join(format_result(item) for item in value)}]"
    return str(value)


__all__ = [
    "DEFAULT_SCENARIOS_PATH",
    "FUNCTIONS",
    "OPERATIONS",
    "Scenario",
    "ScenarioSuite",
    "format_result",
    "load_scenarios",
    "parse_scenarios",
    "run_scenario",
]
