"""Infrastructure Layer — the in-memory store, peer HTTP client and cross-cutting concerns.

Invariants:
    - All outbound calls bounded by a timeout and mapped to catalog errors

Design Decisions:
    - Wrappers over raw clients: error mapping stays out of services
"""
