"""Pytest fixtures and configuration."""

from datetime import UTC, datetime

import pytest


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests by default unless -m integration is specified."""
    markexpr = config.getoption("-m", default="")
    if "integration" in markexpr:
        return

    skip_integration = pytest.mark.skip(reason="Integration test - run with: pytest -m integration")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def reference() -> datetime:
    """Monday 2024-01-15, midday UTC."""
    return datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
