"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Driver and ORM exceptions never escape this layer unclassified

Design Decisions:
    - Repository implementations live here; handlers only see core protocols
"""
