"""Shared helpers: logging setup and coordinate text parsing."""
