"""Services Layer — imperative shell around the pure registration pipeline.

Invariants:
    - Services own transactions; core functions never commit or roll back

Design Decisions:
    - Thin async wrappers: all decisions live in core/, services only sequence IO
"""
