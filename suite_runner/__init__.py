"""Lint shell test files and run the bats test suite."""
