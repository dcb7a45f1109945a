"""Shared helpers: error types, logging and code point tables."""
