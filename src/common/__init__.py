"""Shared helpers used across the CLI and manifest modules."""
