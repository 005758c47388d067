"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (no implicit clock reads)

Design Decisions:
    - Functional core separated from imperative shell: the shell supplies
      "today", the core only does calendar arithmetic
"""
