"""Global pytest fixtures and default marks for strseq."""

from pathlib import Path

import pytest

pytest_plugins = [
    "tests.fixtures.sqlite",
]

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test directory -> mark applied to every test collected under it
DIRECTORY_MARKS = {"unit": "unit", "integration": "integration", "e2e": "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark each item after the top-level directory it lives in."""
    for item in items:
        try:
            top = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if (mark := DIRECTORY_MARKS.get(top)) is None:
            continue
        if not any(marker.name == mark for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, mark))
