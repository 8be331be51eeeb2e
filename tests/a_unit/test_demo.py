"""Unit tests for funlist.demo module."""

from __future__ import annotations

from pathlib import Path

import pytest

from funlist.demo import (
    DEFAULT_SCENARIOS_PATH,
    OPERATIONS,
    Scenario,
    format_result,
    load_scenarios,
    parse_scenarios,
    run_scenario,
)
from funlist.ops import cons_list, to_list
from funlist.option import ABSENT, Some


class TestLoadScenarios:
    """Tests for YAML loading."""

    def test_default_file_exists(self) -> None:
        assert DEFAULT_SCENARIOS_PATH.exists()

    def test_load_default(self) -> None:
        suite = load_scenarios()
        assert suite.name == "funlist demo"
        assert suite.source == DEFAULT_SCENARIOS_PATH
        assert len(suite.enabled()) == 9
        assert len(suite.scenarios) > len(suite.enabled())

    def test_load_custom(self, tmp_path: Path) -> None:
        path = tmp_path / "scenarios.yaml"
        path.write_text(
            "name: mine\n"
            "scenarios:\n"
            "  - operation: length\n"
            "    lists: [[1, 2]]\n"
            "  - name: sum\n"
            "    operation: fold_left\n"
            "    lists: [[1, 2, 3]]\n"
            "    seed: 0\n"
            "    function: add\n"
        )
        suite = load_scenarios(path)
        assert suite.name == "mine"
        assert [s.name for s in suite.scenarios] == ["length", "sum"]
        assert suite.scenarios[1].has_seed
        assert suite.scenarios[1].seed == 0
        assert not suite.scenarios[0].has_seed


class TestParseScenarios:
    """Tests for scenario validation."""

    def test_missing_scenarios_key(self) -> None:
        with pytest.raises(ValueError, match="'scenarios' key"):
            parse_scenarios({"name": "x"})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ValueError):
            parse_scenarios(["length"])

    def test_missing_operation(self) -> None:
        with pytest.raises(ValueError, match="has no 'operation'"):
            parse_scenarios({"scenarios": [{"name": "x"}]})

    def test_unknown_operation(self) -> None:
        with pytest.raises(ValueError, match="unknown operation 'sort'"):
            parse_scenarios({"scenarios": [{"operation": "sort"}]})

    def test_unknown_function(self) -> None:
        with pytest.raises(ValueError, match="unknown function 'nope'"):
            parse_scenarios({"scenarios": [{"operation": "map_list", "function": "nope"}]})

    def test_lists_must_be_list_of_lists(self) -> None:
        with pytest.raises(ValueError, match="'lists' must be a list of lists"):
            parse_scenarios({"scenarios": [{"operation": "length", "lists": 5}]})
        with pytest.raises(ValueError, match="'lists' must be a list of lists"):
            parse_scenarios({"scenarios": [{"operation": "length", "lists": [1, 2]}]})

    def test_empty_scenarios(self) -> None:
        assert parse_scenarios({"scenarios": None}).scenarios == []

    def test_null_seed_is_kept(self) -> None:
        suite = parse_scenarios({"scenarios": [{"operation": "fold_left", "seed": None}]})
        assert suite.scenarios[0].has_seed
        assert suite.scenarios[0].seed is None

    def test_variadic_helpers_not_exposed(self) -> None:
        assert "cons_list" not in OPERATIONS
        assert "cons" not in OPERATIONS
        assert "flat_map" in OPERATIONS


class TestRunScenario:
    """Tests for scenario execution."""

    def test_default_scenarios(self) -> None:
        results = {s.name: run_scenario(s) for s in load_scenarios().scenarios}
        assert results["flat_map"] == cons_list("1", "3", "2", "4", "3", "5")
        assert results["get index 1"] == Some(2)
        assert results["get index 3"] is ABSENT
        assert results["take 2"] == cons_list(1, 2)
        assert results["drop 2"] == cons_list(3)
        assert results["contains 2"] is True
        assert results["contains 4"] is False
        assert results["head"] == Some(1)
        assert results["zip_with"] == cons_list((1, "a"), (2, "b"), (3, "c"))
        assert results["fold_left nesting"] == "(((z a) b) c)"
        assert results["fold_right nesting"] == "(a (b (c z)))"

    def test_argument_order(self) -> None:
        scenario = Scenario(
            name="fold",
            operation="fold_right",
            lists=[["a", "b"]],
            seed="!",
            has_seed=True,
            function="concat_str",
        )
        assert run_scenario(scenario) == "ab!"

    def test_to_list(self) -> None:
        scenario = Scenario(name="copy", operation="to_list", lists=[[1, 2]])
        assert run_scenario(scenario) == [1, 2]


class TestFormatResult:
    """Tests for result rendering."""

    def test_lists_and_options(self) -> None:
        assert format_result(cons_list(1, 2)) == "ConsList(1, 2)"
        assert format_result(Some("a")) == "Some('a')"
        assert format_result(ABSENT) == "Absent"

    def test_plain_values(self) -> None:
        assert format_result(True) == "True"
        assert format_result("abc") == "abc"
        assert format_result(to_list(cons_list(1, 2))) == "[1, 2]"
