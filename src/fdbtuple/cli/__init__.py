"""Command-line interface for fdbtuple."""
