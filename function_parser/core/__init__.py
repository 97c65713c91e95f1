"""Core Layer — pure registration logic, no IO, no imports of user code.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Grouping, naming, merge and route planning are deterministic functions of their inputs

Design Decisions:
    - Functional core separated from the filesystem/import shell
"""
