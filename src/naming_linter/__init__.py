"""Naming policy linter for enum and interface declarations."""

__version__ = "0.1.0"
