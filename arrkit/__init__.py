"""arrkit — pure collection helpers: top-K selection, structural hashing, deep compare.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports from arrkit.core.* only, no star exports
"""

__version__ = "0.1.0"
