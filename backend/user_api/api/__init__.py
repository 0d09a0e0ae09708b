"""API Layer — FastAPI routes, dependency providers and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every JSON body on the user resource is a {data} or {errors} envelope

Design Decisions:
    - Thin routes delegate to services/handle_users.py
"""
