import pytest


def pytest_collection_modifyitems(items):
    """Mark tests by directory: 'unit' for tests/unit, 'integration' for tests/integration."""
    for item in items:
        path = str(item.path)
        if "/integration/" in path:
            item.add_marker(pytest.mark.integration)
        elif "/unit/" in path:
            item.add_marker(pytest.mark.unit)
