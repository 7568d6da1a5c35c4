"""Test basic package functionality."""

import printavo


def test_version():
    """Test that package version is defined."""
    assert hasattr(printavo, "__version__")
    assert printavo.__version__ == "0.1.0"


def test_public_api():
    for name in printavo.__all__:
        assert hasattr(printavo, name)
