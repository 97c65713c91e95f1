"""Pydantic Schemas — validation of user-supplied endpoint descriptors.

Invariants:
    - Descriptors validate at the system boundary (the loaded endpoint module)
    - Domain types from core/ used for enum fields
"""
