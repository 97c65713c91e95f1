"""API Layer — FastAPI building blocks applied to every published group app.

Invariants:
    - Group-wide middleware policy is decided before any route is registered
    - All group apps answer errors with the same structured JSON envelope
"""
