"""Custom exception hierarchy for bank-manager."""


class BankManagerError(Exception):
    """Base exception for all bank-manager errors."""


class IdentifierExhaustedError(BankManagerError):
    """Raised when every identifier of a range is already taken."""


class SnapshotError(BankManagerError):
    """Raised when a persisted directory snapshot cannot be decoded."""


class ConfigurationError(BankManagerError):
    """Raised when configuration is invalid or missing."""
