"""Function Parser — auto-registration of serverless functions and REST endpoints.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, entry point is parser.FunctionParser
"""
