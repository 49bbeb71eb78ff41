"""Use-case layer for catalog workflows.

Each module coordinates domain objects and ports without touching the
filesystem directly, preserving MVVM + Hexagonal boundaries.
"""
