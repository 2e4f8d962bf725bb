"""Infrastructure — database session management, task persistence, logging setup.

Invariants:
    - Only this layer talks to SQLAlchemy sessions
    - Every SQLAlchemy failure leaves here as StoreUnavailableError
"""
