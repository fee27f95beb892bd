"""Core Layer — pure collection logic, no IO, no settings, no global state.

Invariants:
    - No module in core/ imports from infrastructure/, config or cli
    - All functions are pure and deterministic (sampling takes its RNG as a parameter)
    - Arguments are never mutated; every helper returns a new container

Design Decisions:
    - Functional core separated from the CLI shell (ADR: impureim sandwich)
"""
