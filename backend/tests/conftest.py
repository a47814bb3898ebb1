from fastapi.testclient import TestClient
import pytest

from backend.tests.utils.node_factories import raw_node


@pytest.fixture(scope="session")
def client():
    # Import lazily so tests that only exercise the core skip app startup.
    from backend.app import app

    return TestClient(app)


@pytest.fixture
def nav_with_buttons():
    """A navigation frame holding two buttons, as Figma returns it."""
    return [
        raw_node(
            "nav-1",
            "Main Navigation",
            raw_node("btn-1", "Home Button"),
            raw_node("btn-2", "About Button"),
        )
    ]
