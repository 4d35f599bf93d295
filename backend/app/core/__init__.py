"""Core Layer — outcome kernel, member records, errors, and the registration pipeline.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - No async; IO only through the MemberRepository protocol

Design Decisions:
    - Functional core separated from imperative shell: the pipeline is tested
      against an in-memory fake repository, no database needed
"""
