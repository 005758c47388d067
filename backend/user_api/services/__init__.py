"""Services — imperative shell orchestrating repositories around the pure core.

Invariants:
    - Services own the clock; core functions receive dates as arguments
"""
