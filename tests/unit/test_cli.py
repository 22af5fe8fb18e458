"""Tests for CLI tool."""

from __future__ import annotations

import json
import subprocess
import sys

import pytest

from fdbtuple import __version__
from fdbtuple.cli.main import main


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "fdbtuple.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "fdbtuple: Order-Preserving Tuple Codec" in result.stdout
    assert "--encode" in result.stdout
    assert "--decode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "fdbtuple.cli.main", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert f"fdbtuple {__version__}" in result.stdout


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = subprocess.run(
        [sys.executable, "-m", "fdbtuple.cli.main"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "fdbtuple: Order-Preserving Tuple Codec" in result.stdout


def test_encode(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --encode with a JSON array."""
    assert main(["--encode", '["users", 42, null]']) == 0

    assert capsys.readouterr().out.strip() == "02757365727300152a00"


def test_encode_with_prefix(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --prefix is prepended when encoding."""
    assert main(["--encode", "[1]", "--prefix", "fe"]) == 0

    assert capsys.readouterr().out.strip() == "fe1501"


def test_encode_float32(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --float32 selects 32-bit floats."""
    assert main(["--encode", "[1.5]", "--float32"]) == 0

    assert capsys.readouterr().out.strip() == "20bfc00000"


def test_encode_not_array(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --encode rejects non-array JSON."""
    assert main(["--encode", '{"a": 1}']) == 1

    assert "JSON array" in capsys.readouterr().err


def test_decode(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --decode prints elements as JSON."""
    assert main(["--decode", "02757365727300152a00"]) == 0

    decoded = json.loads(capsys.readouterr().out)
    assert decoded == [
        {"kind": "text", "value": "users"},
        {"kind": "int", "value": 42},
        {"kind": "null"},
    ]


def test_decode_with_prefix(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --prefix is stripped when decoding."""
    assert main(["--decode", "fe1501", "--prefix", "fe"]) == 0

    assert json.loads(capsys.readouterr().out) == [{"kind": "int", "value": 1}]


def test_decode_error(capsys: pytest.CaptureFixture[str]) -> None:
    """Test malformed keys exit with an error."""
    assert main(["--decode", "15"]) == 1

    assert "Error" in capsys.readouterr().err


def test_decode_bad_hex(capsys: pytest.CaptureFixture[str]) -> None:
    """Test invalid hex input exits with an error."""
    assert main(["--decode", "zz"]) == 1

    assert "Error" in capsys.readouterr().err


def test_decode_max_depth(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --max-depth limits nesting."""
    assert main(["--decode", "05050000", "--max-depth", "1"]) == 1

    assert "max_depth=1" in capsys.readouterr().err


def test_explain(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --explain prints a breakdown."""
    assert main(["--explain", "0500ff150100", "--verbose"]) == 0

    out = capsys.readouterr().out
    assert "fdbtuple: Order-Preserving Tuple Codec" in out
    assert "1 element decoded." in out
    assert "tuple (2 elements)" in out
    assert "[   3] int" in out
    assert "Total: 6 bytes" in out
