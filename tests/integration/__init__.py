"""Integration tests.

Exercise the SQLAlchemy column type against a real (in-memory SQLite)
engine, with tables created and dropped per test.
"""
