"""
Core quantity model, numerical primitives and contracts.

Pure computation: no I/O, no shared mutable state.
"""
