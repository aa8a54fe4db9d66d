"""
Tests for the in-process request manager.

Run with:  python -m pytest numproc_commands/test_manager.py -v
"""

import pytest

from numproc_commands.dispatcher import CommandParser
from numproc_commands.enums import NumberType
from numproc_commands.manager import LocalRequestManager
from numproc_commands.reporting import RecordingReporter


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def local(tmp_path, reporter):
    return LocalRequestManager(reporter=reporter, base_dir=tmp_path, seed=1234)


def read_numbers(path):
    return path.read_text().split()


class TestPingEcho:

    def test_ping_reports_pong(self, local, reporter):
        local.ping()
        assert reporter.infos == ["pong"]

    def test_echo_returns_text(self, local, reporter):
        assert local.echo("Hello  World") == "Hello  World"
        assert reporter.infos == ["Echo: Hello  World"]


class TestGenerate:

    def test_integers_within_bounds(self, local, tmp_path):
        target = local.generate("ints.txt", 200, NumberType.INTEGER, -5, 5)
        assert target == tmp_path / "ints.txt"
        values = [int(v) for v in read_numbers(target)]
        assert len(values) == 200
        assert all(-5 <= v <= 5 for v in values)

    def test_integer_bounds_are_inclusive(self, local):
        target = local.generate("same.txt", 10, NumberType.INTEGER, 7, 7)
        assert read_numbers(target) == ["7"] * 10

    def test_decimals_within_bounds(self, local):
        target = local.generate("dec.txt", 100, NumberType.DECIMAL, 0, 1)
        tokens = read_numbers(target)
        assert len(tokens) == 100
        assert all("." in t for t in tokens)
        assert all(0.0 <= float(t) <= 1.0 for t in tokens)

    def test_decimal_places(self, tmp_path, reporter):
        local = LocalRequestManager(reporter=reporter, base_dir=tmp_path, decimal_places=2)
        target = local.generate("dec.txt", 5, NumberType.DECIMAL, 10, 20)
        assert all(len(t.split(".")[1]) == 2 for t in read_numbers(target))

    def test_zero_count_writes_empty_file(self, local):
        target = local.generate("empty.txt", 0, NumberType.INTEGER, 0, 10)
        assert target.exists()
        assert read_numbers(target) == []

    def test_creates_parent_directories(self, local, tmp_path):
        local.generate("nested/dir/out.txt", 3, NumberType.INTEGER, 0, 1)
        assert (tmp_path / "nested" / "dir" / "out.txt").exists()

    def test_min_greater_than_max_raises(self, local, tmp_path):
        with pytest.raises(ValueError, match="Minimum must not exceed maximum"):
            local.generate("bad.txt", 3, NumberType.INTEGER, 5, 1)
        assert not (tmp_path / "bad.txt").exists()

    def test_same_seed_same_numbers(self, tmp_path, reporter):
        first = LocalRequestManager(reporter=reporter, base_dir=tmp_path, seed=7)
        second = LocalRequestManager(reporter=reporter, base_dir=tmp_path, seed=7)
        a = first.generate("a.txt", 20, NumberType.INTEGER, 0, 1000)
        b = second.generate("b.txt", 20, NumberType.INTEGER, 0, 1000)
        assert a.read_text() == b.read_text()


class TestSort:

    def test_sorts_integers(self, local, tmp_path):
        (tmp_path / "in.txt").write_text("5\n-3\n10 2\n0\n")
        target = local.sort("in.txt", "out.txt")
        assert read_numbers(target) == ["-3", "0", "2", "5", "10"]

    def test_sorts_decimals(self, local, tmp_path):
        (tmp_path / "in.txt").write_text("2.5\n-1\n0.25\n")
        target = local.sort("in.txt", "out.txt")
        assert [float(v) for v in read_numbers(target)] == [-1.0, 0.25, 2.5]

    def test_decimals_use_configured_places(self, local, tmp_path):
        (tmp_path / "in.txt").write_text("2.5\n-1\n0.25\n")
        target = local.sort("in.txt", "out.txt")
        assert read_numbers(target) == ["-1.000000", "0.250000", "2.500000"]

    def test_decimal_places_override(self, tmp_path, reporter):
        local = LocalRequestManager(reporter=reporter, base_dir=tmp_path, decimal_places=2)
        (tmp_path / "in.txt").write_text("3.14159\n1\n")
        target = local.sort("in.txt", "out.txt")
        assert read_numbers(target) == ["1.00", "3.14"]

    def test_empty_input(self, local, tmp_path):
        (tmp_path / "in.txt").write_text("")
        target = local.sort("in.txt", "out.txt")
        assert target.read_text() == ""

    def test_missing_input_raises(self, local):
        with pytest.raises(FileNotFoundError):
            local.sort("missing.txt", "out.txt")

    def test_non_numeric_input_raises(self, local, tmp_path):
        (tmp_path / "in.txt").write_text("1\ntwo\n3\n")
        with pytest.raises(ValueError):
            local.sort("in.txt", "out.txt")


class TestThroughParser:
    """End-to-end: text line → parser → local manager → files."""

    def test_generate_then_process(self, local, reporter, tmp_path):
        parser = CommandParser(local, reporter=reporter)
        assert parser.call_safe('generate "raw.txt" 50 integer -100 100')
        assert parser.call_safe('process "raw.txt" "sorted.txt"')

        values = [int(v) for v in read_numbers(tmp_path / "sorted.txt")]
        assert len(values) == 50
        assert values == sorted(values)
        assert reporter.errors == []

    def test_missing_file_is_reported_not_raised(self, local, reporter):
        parser = CommandParser(local, reporter=reporter)
        assert parser.call_safe('process "nope.txt" "out.txt"') is False
        assert len(reporter.errors) == 1
