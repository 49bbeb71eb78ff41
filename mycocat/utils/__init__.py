"""Shared runtime helpers (logging configuration)."""
