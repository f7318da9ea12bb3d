"""Adapters (infrastructure) for strseq.

Provide persistence mapping for domain values (e.g., SQLAlchemy column types).

Dependency rule: may import `strseq.domain`; the domain must not import this
package.
"""
