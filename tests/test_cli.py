"""Tests for the typer CLI apps."""
from typer.testing import CliRunner

from advent2023.cli import check_examples, list_days, solve
from advent2023.days import day05, day06

runner = CliRunner()


class TestSolve:
    def test_single_day_example(self) -> None:
        result = runner.invoke(solve.app, ["2", "--example"])
        assert result.exit_code == 0, result.output
        assert "Day 2" in result.output
        assert "2286" in result.output

    def test_all_days_example(self) -> None:
        result = runner.invoke(solve.app, ["--all", "--example"])
        assert result.exit_code == 0, result.output
        for day_num in range(1, 9):
            assert f"Day {day_num}:" in result.output

    def test_parallel_keeps_day_order(self) -> None:
        result = runner.invoke(solve.app, ["--parallel", "--example"])
        assert result.exit_code == 0, result.output
        assert result.output.index("Day 1:") < result.output.index("Day 8:")

    def test_latest_day_by_default(self) -> None:
        result = runner.invoke(solve.app, ["--example"])
        assert result.exit_code == 0, result.output
        assert "Day 8" in result.output

    def test_unknown_day(self) -> None:
        result = runner.invoke(solve.app, ["99"])
        assert result.exit_code == 1

    def test_missing_input_fails(self, inputs_dir) -> None:
        result = runner.invoke(solve.app, ["6", "--inputs-dir", str(inputs_dir)])
        assert result.exit_code == 1
        assert "FileNotFoundError" in result.output

    def test_reads_input_and_writes_results(self, inputs_dir, tmp_path) -> None:
        (inputs_dir / "day06.txt").write_text(day06.EXAMPLE + "\n", encoding="utf-8")
        out = tmp_path / "results.jsonl"
        result = runner.invoke(
            solve.app, ["6", "--inputs-dir", str(inputs_dir), "--out", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert "71503" in result.output
        assert b'"part1":"288"' in out.read_bytes()

    def test_invalid_almanac_search_setting(self) -> None:
        result = runner.invoke(solve.app, ["5", "--example"], env={"ADVENT_ALMANAC_SEARCH": "fast"})
        assert result.exit_code == 1
        assert "Unknown ADVENT_ALMANAC_SEARCH" in result.output

    def test_almanac_search_from_environment(self) -> None:
        result = runner.invoke(solve.app, ["5", "--example"], env={"ADVENT_ALMANAC_SEARCH": "probe"})
        assert result.exit_code == 0, result.output
        assert "46" in result.output
        assert day05._selected_search == "probe"


class TestOtherCommands:
    def test_check_examples(self) -> None:
        result = runner.invoke(check_examples.app, [])
        assert result.exit_code == 0, result.output
        assert "All 8 days match" in result.output

    def test_list_days(self) -> None:
        result = runner.invoke(list_days.app, [])
        assert result.exit_code == 0, result.output
        assert "Camel Cards" in result.output
