"""Dead Media Catalog — resource API for obsolete physical media formats.

Invariants:
    - Package root contains no executable code beyond the version constant

Design Decisions:
    - Explicit imports only, no star exports
"""

__version__ = "1.0.0"
