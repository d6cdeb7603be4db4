"""Services - one SQLAlchemy statement per operation.

Invariants:
    - Services never build HTTP responses; they return ORM rows or raise MatchfeedError
    - Every statement runs inside storage_errors(): driver failures become StorageError
"""
