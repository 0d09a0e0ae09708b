"""Services Layer — request handlers for the User resource.

Invariants:
    - Handlers depend on the UserRepository protocol, never on SQLAlchemy

Design Decisions:
    - One handler class per resource for locality
"""
