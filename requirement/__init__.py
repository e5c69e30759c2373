"""requirement — named, composable validation predicates.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, e.g.
      `from requirement.core.predicates import min_length`
"""
