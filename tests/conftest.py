"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import uuid

import pytest

from fdbtuple import CompleteVersionstamp, IncompleteVersionstamp


@pytest.fixture
def sample_uuid() -> uuid.UUID:
    """UUID used by the reference encodings."""
    return uuid.UUID("87245765-c8d1-42f8-8529-ff2f5e20e2fc")


@pytest.fixture
def sample_versionstamp() -> CompleteVersionstamp:
    """Complete versionstamp used by the reference encodings."""
    return CompleteVersionstamp(
        transaction_version=0xDEADBEEFDEADBEEF, batch_number=0xBEEF, user_version=12
    )


@pytest.fixture
def sample_incomplete() -> IncompleteVersionstamp:
    """Incomplete versionstamp used by the reference encodings."""
    return IncompleteVersionstamp(user_version=12)
