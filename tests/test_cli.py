"""Tests for the identicon command line."""

import subprocess
import sys

import pytest

from identicon import render
from identicon.cli.batch_process import main


def test_cli_help():
    """Test CLI help command."""
    result = subprocess.run(
        [sys.executable, "-m", "identicon.cli.batch_process", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "identicon" in result.stdout or "usage" in result.stdout.lower()


def test_cli_generates_each_input(output_dir, capsys):
    code = main(["alice", "bob", "--output-dir", str(output_dir), "--workers", "2"])

    assert code == 0
    assert (output_dir / "alice.png").read_bytes() == render("alice")
    assert (output_dir / "bob.png").exists()
    out = capsys.readouterr().out.splitlines()
    assert out == [str(output_dir / "alice.png"), str(output_dir / "bob.png")]


def test_cli_reads_inputs_from_file(tmp_path, output_dir):
    names = tmp_path / "names.txt"
    names.write_text("carol\n\ndave\n", encoding="utf-8")

    code = main(["--from-file", str(names), "--output-dir", str(output_dir)])

    assert code == 0
    assert sorted(p.name for p in output_dir.iterdir()) == ["carol.png", "dave.png"]


def test_cli_without_inputs_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 2


def test_cli_reports_write_failure(tmp_path):
    code = main(["alice", "--output-dir", str(tmp_path / "missing")])

    assert code == 1
