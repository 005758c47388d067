"""Infrastructure — database sessions, persistence adapters, logging setup.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
"""
