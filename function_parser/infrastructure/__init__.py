"""Infrastructure Layer — filesystem walking, module loading, adapters, logging.

Invariants:
    - Infrastructure never decides grouping or naming (delegates to core/)
    - Load and filesystem failures propagate unchanged to the caller
"""
