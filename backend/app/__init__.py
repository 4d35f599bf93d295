"""Member Registry Application Package — membership registration service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
