"""Unit tests.

Verify a single module/class/function in isolation: no database, no
filesystem beyond pytest's tmp_path, no network.
"""
