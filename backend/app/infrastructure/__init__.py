"""Infrastructure Layer — database access, repositories, and cross-cutting concerns.

Invariants:
    - Infrastructure may import core types; core never imports infrastructure
    - Driver-specific exceptions are translated here before reaching core or API
"""
