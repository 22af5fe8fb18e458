"""Unit tests for codec configuration."""

from __future__ import annotations

import dataclasses

import pytest

from fdbtuple import DEFAULT_CONFIG, CodecConfig


def test_defaults() -> None:
    """Test default values."""
    assert DEFAULT_CONFIG.max_depth == 64
    assert DEFAULT_CONFIG.native_float == "double"


def test_negative_depth() -> None:
    """Test max_depth validation."""
    with pytest.raises(ValueError, match="max_depth"):
        CodecConfig(max_depth=-1)


def test_native_float_choice() -> None:
    """Test native_float validation."""
    assert CodecConfig(native_float="float").native_float == "float"

    with pytest.raises(ValueError, match="native_float"):
        CodecConfig(native_float="half")  # type: ignore[arg-type]


def test_frozen() -> None:
    """Test configuration is immutable."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.max_depth = 1  # type: ignore[misc]
