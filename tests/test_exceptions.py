"""Tests for custom exception hierarchy."""

from bank_manager.exceptions import (
    BankManagerError,
    ConfigurationError,
    IdentifierExhaustedError,
    SnapshotError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_bank_manager_error_is_exception(self) -> None:
        """Test that the base error is an Exception."""
        assert isinstance(BankManagerError("test"), Exception)

    def test_identifier_exhausted_is_bank_manager_error(self) -> None:
        """Test IdentifierExhaustedError inheritance."""
        assert isinstance(IdentifierExhaustedError("test"), BankManagerError)

    def test_snapshot_error_is_bank_manager_error(self) -> None:
        """Test SnapshotError inheritance."""
        assert isinstance(SnapshotError("test"), BankManagerError)

    def test_configuration_error_is_bank_manager_error(self) -> None:
        """Test ConfigurationError inheritance."""
        assert isinstance(ConfigurationError("test"), BankManagerError)

    def test_exception_message(self) -> None:
        """Test that the message is preserved."""
        err = SnapshotError("Duplicate bank identifiers in snapshot")
        assert str(err) == "Duplicate bank identifiers in snapshot"
