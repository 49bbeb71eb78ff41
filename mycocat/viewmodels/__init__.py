"""ViewModel package for UI state and command surfaces.

Call context:
    ``mycocat/app/controller.py`` and the NiceGUI pages import concrete
    viewmodels from this package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types and lightweight formatting
    helpers only. File I/O and use-case orchestration remain outside.

Responsibilities:
    - Hold query state and expose command callbacks for views.
    - Project the pure engine output into display-ready labels and options.
    - Model dropdown open/closed state explicitly.
"""
