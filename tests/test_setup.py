"""Basic test to verify setup is working."""

import draft_order


def test_basic_setup() -> None:
    """Test that basic Python functionality works."""
    assert True


def test_imports() -> None:
    """Test that we can import from the draft_order package."""
    assert draft_order is not None
