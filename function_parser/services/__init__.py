"""Services Layer — the two registration passes and router assembly.

Invariants:
    - Each pass returns a value (no namespace mutation inside services)
    - Reactive and endpoint passes share grouping from core/grouping.py
"""
