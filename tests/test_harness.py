"""Tests for advent2023.harness."""
import orjson
import pytest

from advent2023.core.errors import ParseFailure
from advent2023.days import DAYS
from advent2023.days import day02, day06
from advent2023.harness import (
    DayResult,
    check_examples,
    input_paths,
    load_input,
    run_day,
    run_days,
    write_results,
)
from advent2023.utils import render_display


class TestRenderDisplay:
    def test_substitutes_answer(self) -> None:
        assert render_display("The sum is {answer}.", 42) == "The sum is 42."

    def test_no_other_templating(self) -> None:
        assert render_display("{other} {answer}", "x") == "{other} x"


class TestLoadInput:
    def test_reads_day_file(self, inputs_dir) -> None:
        (inputs_dir / "day02.txt").write_text("abc\n", encoding="utf-8")
        assert load_input(2, str(inputs_dir)) == "abc\n"

    def test_parent_directory_fallback(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "inputs").mkdir()
        (tmp_path / "inputs" / "day03.txt").write_text("x", encoding="utf-8")
        work = tmp_path / "work"
        work.mkdir()
        monkeypatch.chdir(work)
        assert load_input(3) == "x"

    def test_missing_names_both_paths(self, inputs_dir) -> None:
        with pytest.raises(FileNotFoundError) as exc:
            load_input(4, str(inputs_dir))
        for path in input_paths(4, str(inputs_dir)):
            assert str(path) in str(exc.value)

    def test_non_utf8_is_parse_failure(self, inputs_dir) -> None:
        (inputs_dir / "day02.txt").write_bytes(b"Game 1: 3 blue\xff\n")
        with pytest.raises(ParseFailure):
            load_input(2, str(inputs_dir))


class TestRunDay:
    def test_from_file_with_trailing_newline(self, inputs_dir) -> None:
        (inputs_dir / "day02.txt").write_text(day02.EXAMPLE + "\n", encoding="utf-8")
        result = run_day(2, DAYS[2], inputs_dir=str(inputs_dir))
        assert result.ok
        assert result.answers == ("8", "2286")
        assert result.rendered()[1] == "The sum of the powers is 2286."

    def test_example(self) -> None:
        result = run_day(1, DAYS[1], example=True)
        assert result.answers == ("142", "281")
        assert result.example

    def test_missing_input_is_reported(self, inputs_dir) -> None:
        result = run_day(5, DAYS[5], inputs_dir=str(inputs_dir))
        assert not result.ok
        assert result.error.startswith("FileNotFoundError")
        with pytest.raises(ValueError):
            result.rendered()

    def test_parse_failure_is_reported(self, inputs_dir) -> None:
        (inputs_dir / "day02.txt").write_text("Game x\nGame y\n", encoding="utf-8")
        result = run_day(2, DAYS[2], inputs_dir=str(inputs_dir))
        assert result.error.startswith("ParseFailure")

    def test_non_utf8_input_is_reported(self, inputs_dir) -> None:
        (inputs_dir / "day02.txt").write_bytes(b"Game 1: 3 blue\xff\n")
        result = run_day(2, DAYS[2], inputs_dir=str(inputs_dir))
        assert not result.ok
        assert result.error.startswith("ParseFailure")

    def test_almanac_search_not_read_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("ADVENT_ALMANAC_SEARCH", "fast")
        result = run_day(5, DAYS[5], example=True)
        assert result.ok
        assert result.answers == ("35", "46")


class TestRunDays:
    def test_one_broken_input_keeps_other_days(self, inputs_dir) -> None:
        (inputs_dir / "day02.txt").write_bytes(b"Game 1: 3 blue\xff\n")
        (inputs_dir / "day06.txt").write_text(day06.EXAMPLE, encoding="utf-8")
        days = {2: DAYS[2], 6: DAYS[6]}
        results = run_days(days, inputs_dir=str(inputs_dir), parallel=True)
        assert [r.ok for r in results] == [False, True]
        assert results[1].answers == ("288", "71503")

    def test_parallel_matches_sequential(self, all_days) -> None:
        sequential = run_days(all_days, example=True)
        parallel = run_days(all_days, example=True, parallel=True)
        assert [r.day_num for r in parallel] == sorted(all_days)
        assert [r.answers for r in parallel] == [r.answers for r in sequential]

    def test_check_examples_all_pass(self, all_days) -> None:
        checks = check_examples(all_days)
        assert len(checks) == len(all_days)
        assert all(c.passed for c in checks)


class TestWriteResults:
    def test_appends_json_lines(self, tmp_path) -> None:
        out = tmp_path / "out" / "results.jsonl"
        result = DayResult(day_num=6, title="Wait For It", display=("{answer}", "{answer}"),
                           answers=("288", "71503"))
        write_results([result], str(out))
        write_results([result], str(out))
        lines = out.read_bytes().splitlines()
        assert len(lines) == 2
        record = orjson.loads(lines[0])
        assert record["day"] == 6
        assert record["part2"] == "71503"
        assert record["error"] is None
