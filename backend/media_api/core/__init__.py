"""Core Layer — pure domain logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or schemas/
    - All functions are pure and deterministic (clock values passed in)

Design Decisions:
    - Functional core separated from imperative shell: the store wraps
      these functions with locking and state
"""
