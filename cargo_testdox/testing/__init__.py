"""Helpers for testing cargo-testdox."""
