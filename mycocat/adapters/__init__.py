"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (JSON dataset files and
    local settings storage) used by use cases.

Dependencies:
    Submodules depend on filesystem APIs, ``json`` and the domain record
    normalizer.

Call context:
    Imported by the web runtime (for wiring) and by tests.
"""
