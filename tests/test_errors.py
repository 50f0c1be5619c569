"""Tests for apiver.errors: exception hierarchy and error messages."""

import pytest

from apiver.errors import ApiverError, InvalidArgumentError


class TestHierarchy:
    def test_invalid_argument_is_apiver_error(self) -> None:
        assert issubclass(InvalidArgumentError, ApiverError)

    def test_invalid_argument_is_type_error(self) -> None:
        assert issubclass(InvalidArgumentError, TypeError)


class TestInvalidArgumentError:
    def test_message(self) -> None:
        err = InvalidArgumentError("Listener.add_rule", "a string regular expression", 42)
        assert str(err) == "Listener.add_rule expects a string regular expression as an argument; received int"

    def test_attributes(self) -> None:
        err = InvalidArgumentError("Listener.add_rule", "a string", [])
        assert err.method == "Listener.add_rule"
        assert err.received_type == "list"

    def test_caught_as_type_error(self) -> None:
        with pytest.raises(TypeError):
            raise InvalidArgumentError("f", "a string", None)
