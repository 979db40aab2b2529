"""Global pytest configuration for StudyBook.

Adds a default marker to every test based on the top-level directory it lives
in (``tests/unit`` -> ``unit`` and so on), unless the test already carries
that marker.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DEFAULT_MARKERS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "functional": "functional",
    TESTS_ROOT / "integration": "integration",
    TESTS_ROOT / "e2e": "e2e",
}

pytest_plugins = [
    "tests.fixtures.entities",
]


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the directory's default mark to each collected item."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        for root, marker_name in DEFAULT_MARKERS.items():
            if root in path.parents:
                if not any(m.name == marker_name for m in item.iter_markers()):
                    item.add_marker(getattr(pytest.mark, marker_name))
                break
