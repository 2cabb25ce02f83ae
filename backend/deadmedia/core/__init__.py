"""Core Layer — pure domain logic, no network, no store access.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Pagination, validation, formatting and URL handling are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell
"""
