"""Core Layer — request parsing, envelope, errors and persistence contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (handlers orchestrate IO)
"""
