"""strseq test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real round-trips through a database engine (in-memory SQLite).
- e2e/          : The ``strseq`` CLI invoked through Click's CliRunner.
- fixtures/     : Shared pytest fixtures (no tests here).

Property-based tests live with the layer they exercise and use
@pytest.mark.property. The unit, integration and e2e marks are applied
automatically by directory (see conftest.py).
"""
