"""
Tests for the terminal front end.

Run with:  python -m pytest test_numproc_client.py -v
"""

import pytest

import numproc_client
from config_manager import ClientConfig
from numproc_commands import CommandParser, LocalRequestManager


@pytest.fixture
def config(tmp_path):
    config = ClientConfig()
    config.workspace.base_dir = str(tmp_path)
    config.generation.seed = 3
    config.interface.show_banner = False
    return config


def feed(lines):
    """input() replacement that returns each line, then raises EOFError"""
    remaining = list(lines)

    def _input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)
    return _input


class TestBuildParser:

    def test_uses_local_manager_with_config(self, config, tmp_path):
        parser = numproc_client.build_parser(config)
        assert isinstance(parser, CommandParser)
        assert isinstance(parser.manager, LocalRequestManager)
        assert parser.manager.base_dir == tmp_path
        assert parser.manager.reporter is parser.reporter


class TestRunLines:

    def test_counts_failures(self, config):
        parser = numproc_client.build_parser(config)
        assert numproc_client.run_lines(parser, ["ping", "bogus", "ping extra"]) == 2


class TestInteractiveLoop:

    def test_runs_until_quit(self, config, tmp_path):
        parser = numproc_client.build_parser(config)
        numproc_client.interactive_loop(parser, config, feed([
            'generate "a.txt" 5 integer 0 9',
            "",
            "QUIT",
            'generate "b.txt" 5 integer 0 9',
        ]))
        assert (tmp_path / "a.txt").exists()
        assert not (tmp_path / "b.txt").exists()

    def test_bad_lines_do_not_stop_the_loop(self, config, tmp_path):
        parser = numproc_client.build_parser(config)
        numproc_client.interactive_loop(parser, config, feed([
            "nonsense",
            'generate "x" abc integer 1 2',
            'generate "ok.txt" 1 decimal 0 1',
        ]))
        assert (tmp_path / "ok.txt").exists()

    def test_keyboard_interrupt_ends_loop(self, config):
        def interrupted(prompt=""):
            raise KeyboardInterrupt
        parser = numproc_client.build_parser(config)
        numproc_client.interactive_loop(parser, config, interrupted)


class TestMain:

    def test_execute_lines(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        code = numproc_client.main([
            "--seed", "1",
            "-e", 'generate "raw.txt" 20 integer -10 10',
            "-e", 'process "raw.txt" "sorted.txt"',
        ])
        assert code == 0
        values = [int(v) for v in (tmp_path / "sorted.txt").read_text().split()]
        assert values == sorted(values)

    def test_execute_failure_exit_code(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert numproc_client.main(["-e", "ping", "-e", "bogus"]) == 1

    def test_invalid_configuration_exit_code(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert numproc_client.main(["-v", "-q"]) == 1

    def test_create_config_exit_code(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert numproc_client.main(["--create-config", "sample.yaml"]) == 0

    def test_create_config_failure_exit_code(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        target = str(tmp_path / "missing" / "sample.yaml")
        assert numproc_client.main(["--create-config", target]) == 1
