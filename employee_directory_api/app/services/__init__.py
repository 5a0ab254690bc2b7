"""
Service layer abstraction.

Services encapsulate business rules and receive their record store
as a constructor argument, so the same rules run against the SQLite
database in production and an in‑memory store in tests.
"""
