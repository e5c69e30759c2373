"""Core Layer — pure requirement logic, no IO, no configuration.

Invariants:
    - No module in core/ imports from infrastructure/ or config
    - Every predicate and function is immutable after construction
"""
