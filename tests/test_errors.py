"""
Tests for DuplicateKeyError

Run with: python -m pytest tests/test_errors.py -v
"""

from kvdict.store.errors import DuplicateKeyError


class TestDuplicateKeyError:
    """Test the exception's payload and message."""

    def test_carries_key(self):
        """Test the offending key is kept on the exception."""
        err = DuplicateKeyError(("a", 1))
        assert err.key == ("a", 1)

    def test_message(self):
        """Test the message names the key."""
        assert str(DuplicateKeyError("x")) == "Key already exists: 'x'"

    def test_is_key_error(self):
        """Test it subclasses KeyError."""
        assert isinstance(DuplicateKeyError("x"), KeyError)
