"""Infrastructure Layer — cross-cutting concerns for the CLI shell.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
