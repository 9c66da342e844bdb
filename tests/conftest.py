"""Global pytest configuration for PERSONA.

Tests are marked by the top-level directory they live in (`unit` or
`e2e`) unless they already carry that mark.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKERS = {"unit": "unit", "e2e": "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add a default mark to each item based on its test directory."""
    for item in items:
        relative = item.path.resolve().relative_to(TESTS_ROOT)
        marker_name = DIRECTORY_MARKERS.get(relative.parts[0])
        if marker_name is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))
